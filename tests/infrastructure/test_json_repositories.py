"""Tests for the JSON-backed repositories over a temporary data directory."""

import threading

from storefront.application.add_product_to_cart import AddProductToCartHandler
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _product(product_id: str) -> Product:
    return Product.create(product_id, {
        "title": f"T{product_id}",
        "description": "d",
        "code": f"c{product_id}",
        "price": 1.5,
        "stock": 3,
        "category": "x",
        "thumbnails": ["a.png"],
    })


class TestJsonProductRepository:

    def test_save_and_get(self, tmp_path):
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        product = _product("1")
        repo.save(product)
        assert repo.get_by_id("1") == product

    def test_save_replaces_in_place(self, tmp_path):
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        for pid in ("1", "2", "3"):
            repo.save(_product(pid))
        repo.save(Product.replace("2", {"title": "changed"}))
        assert [p.id for p in repo.list_all()] == ["1", "2", "3"]
        assert repo.get_by_id("2").title == "changed"

    def test_delete_existing(self, tmp_path):
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        repo.save(_product("1"))
        repo.save(_product("2"))
        assert repo.delete("1") is True
        assert [p.id for p in repo.list_all()] == ["2"]

    def test_delete_missing_leaves_file_byte_identical(self, tmp_path):
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        repo.save(_product("1"))
        path = tmp_path / "products.json"
        before = path.read_bytes()
        assert repo.delete("nope") is False
        assert path.read_bytes() == before

    def test_numeric_ids_in_file_still_match(self, tmp_path):
        (tmp_path / "products.json").write_text('[{"id": 42, "title": "x"}]', encoding="utf-8")
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        assert repo.get_by_id("42").title == "x"


    def test_corrupt_records_do_not_break_reads(self, tmp_path):
        (tmp_path / "products.json").write_text(
            '[1, {"title": "no id"}, {"id": "x", "title": "ok"}]', encoding="utf-8"
        )
        repo = JsonProductRepository(JsonCollectionStore(tmp_path))
        assert [p.id for p in repo.list_all()] == ["x"]
        assert repo.get_by_id("x").title == "ok"
        assert repo.get_by_id("nope") is None


class TestJsonCartRepository:

    def test_save_and_get(self, tmp_path):
        repo = JsonCartRepository(JsonCollectionStore(tmp_path))
        cart = Cart.create("1", {"products": [{"id": "p1", "quantity": 2}]})
        repo.save(cart)
        assert repo.get_by_id("1") == cart
        assert repo.get_by_id("2") is None

    def test_cart_with_malformed_lines_reads_as_absent(self, tmp_path):
        (tmp_path / "carts.json").write_text(
            '[7, {"id": "1", "products": "none"}, {"id": "2", "products": []}]',
            encoding="utf-8",
        )
        repo = JsonCartRepository(JsonCollectionStore(tmp_path))
        assert repo.get_by_id("1") is None
        assert repo.get_by_id("2") == Cart("2")

    def test_nan_quantity_persists_as_null_and_merges_from_zero(self, tmp_path):
        repo = JsonCartRepository(JsonCollectionStore(tmp_path))
        repo.save(Cart.create("1"))
        handler = AddProductToCartHandler(repo)

        handler.handle("1", "p1", float("nan"))
        assert repo.get_by_id("1").products == [CartLine("p1", None)]

        assert handler.handle("1", "p1", 2) == [CartLine("p1", 2)]

    def test_concurrent_adds_to_same_cart_all_count(self, tmp_path):
        repo = JsonCartRepository(JsonCollectionStore(tmp_path))
        repo.save(Cart.create("1"))
        handler = AddProductToCartHandler(repo)

        def worker():
            for _ in range(10):
                handler.handle("1", "p1", 1)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert repo.get_by_id("1").products == [CartLine("p1", 40)]
