"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: str) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Replace the cart in place if its ID exists, else append it."""

    @abstractmethod
    def locked(self) -> AbstractContextManager:
        """Serialize a read-modify-write against the cart collection."""
