"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from contextlib import AbstractContextManager

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
    Record,
)

COLLECTION = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load(COLLECTION)]

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load(COLLECTION):
            if str(raw.get("id")) == product_id:
                return self._to_domain(raw)
        return None

    def save(self, product: Product) -> None:
        def upsert(records: list[Record]) -> None:
            for i, raw in enumerate(records):
                if str(raw.get("id")) == product.id:
                    records[i] = self._to_raw(product)
                    return
            records.append(self._to_raw(product))

        self._store.mutate(COLLECTION, upsert)

    def delete(self, product_id: str) -> bool:
        with self.locked():
            records = self._store.load(COLLECTION)
            remaining = [raw for raw in records if str(raw.get("id")) != product_id]
            if len(remaining) == len(records):
                return False
            self._store.save(COLLECTION, remaining)
            return True

    def locked(self) -> AbstractContextManager:
        return self._store.lock(COLLECTION)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> Record:
        return product.to_dict()

    @staticmethod
    def _to_domain(raw: Record) -> Product:
        return Product.from_mapping(raw)
