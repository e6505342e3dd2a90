"""Application service: Create Cart use case."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from storefront.domain.model.cart import Cart
from storefront.domain.ports import IdGenerator
from storefront.domain.repository.cart_repository import CartRepository


class CreateCartHandler:

    def __init__(self, cart_repo: CartRepository, id_generator: IdGenerator) -> None:
        self._cart_repo = cart_repo
        self._ids = id_generator

    def handle(self, overrides: Mapping[str, Any] | None = None) -> Cart:
        """Create an empty cart, overlaid with any caller-supplied fields."""
        with self._cart_repo.locked():
            cart_id = self._ids.next_id()
            while self._cart_repo.get_by_id(cart_id) is not None:
                cart_id = self._ids.next_id()

            cart = Cart.create(cart_id, overrides)
            self._cart_repo.save(cart)

        logger.info("Cart {} created with {} line(s)", cart.id, len(cart.products))
        return cart
