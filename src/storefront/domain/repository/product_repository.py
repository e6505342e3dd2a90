"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in
the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, in stored order."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Replace the product in place if its ID exists, else append it."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Return False (and change nothing) if absent."""

    @abstractmethod
    def locked(self) -> AbstractContextManager:
        """Serialize a read-modify-write against the product collection."""
