"""Application service: Add Product use case."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from storefront.domain.model.product import Product
from storefront.domain.ports import PRODUCT_CREATED, ChangeNotifier, IdGenerator
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifier: ChangeNotifier,
        id_generator: IdGenerator,
    ) -> None:
        self._product_repo = product_repo
        self._notifier = notifier
        self._ids = id_generator

    def handle(self, data: Mapping[str, Any]) -> Product:
        """Add a new product to the catalog and announce it.

        The announcement carries the stored record, generated ``id`` and
        ``status`` included, and is sent only after the write succeeded.
        """
        with self._product_repo.locked():
            product_id = self._ids.next_id()
            while self._product_repo.get_by_id(product_id) is not None:
                product_id = self._ids.next_id()

            product = Product.create(product_id, data)
            self._product_repo.save(product)

        logger.info("Product {} added (code={})", product.id, product.code)
        self._notifier.publish(PRODUCT_CREATED, product.to_dict())
        return product
