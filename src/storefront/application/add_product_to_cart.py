"""Application service: Add Product to Cart use case.

The load, merge and save all happen while the cart collection is
locked, so two concurrent additions to the same cart both count.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartLine
from storefront.domain.repository.cart_repository import CartRepository


class AddProductToCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, product_id: str, quantity: Any) -> list[CartLine]:
        """Merge *quantity* of *product_id* into the cart; return its lines.

        The product id is not checked against the catalog.
        """
        with self._cart_repo.locked():
            cart = self._cart_repo.get_by_id(cart_id)
            if cart is None:
                raise EntityNotFoundError(f"Cart with ID '{cart_id}' not found")

            lines = cart.add_product(product_id, quantity)
            self._cart_repo.save(cart)

        logger.info("Cart {}: added {} x {}", cart_id, quantity, product_id)
        return lines
