"""Application service: Update Product use case."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, data: Mapping[str, Any]) -> Product:
        """Replace a product wholesale.

        Fields missing from *data* are dropped from the stored record;
        the ``id`` is always the one addressed, whatever *data* says.
        """
        with self._product_repo.locked():
            if self._product_repo.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product = Product.replace(product_id, data)
            self._product_repo.save(product)

        logger.info("Product {} replaced", product_id)
        return product
