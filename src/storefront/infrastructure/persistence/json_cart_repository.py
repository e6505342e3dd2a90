"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from contextlib import AbstractContextManager

from loguru import logger

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
    Record,
)

COLLECTION = "carts"


class JsonCartRepository(CartRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: str) -> Cart | None:
        for raw in self._store.load(COLLECTION):
            if str(raw.get("id")) == cart_id:
                try:
                    return self._to_domain(raw)
                except ValidationError as exc:
                    logger.warning("Cart {} is stored malformed: {}; treating as absent", cart_id, exc)
                    return None
        return None

    def save(self, cart: Cart) -> None:
        def upsert(records: list[Record]) -> None:
            for i, raw in enumerate(records):
                if str(raw.get("id")) == cart.id:
                    records[i] = self._to_raw(cart)
                    return
            records.append(self._to_raw(cart))

        self._store.mutate(COLLECTION, upsert)

    def locked(self) -> AbstractContextManager:
        return self._store.lock(COLLECTION)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> Record:
        return cart.to_dict()

    @staticmethod
    def _to_domain(raw: Record) -> Cart:
        return Cart.from_mapping(raw)
