"""Tests for the durable JSON collection store."""

import json
import threading

from storefront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)


class TestLoad:

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        assert store.load("products") == []

    def test_corrupt_file_is_empty(self, tmp_path):
        (tmp_path / "products.json").write_text("{not json", encoding="utf-8")
        assert JsonCollectionStore(tmp_path).load("products") == []

    def test_non_list_document_is_empty(self, tmp_path):
        (tmp_path / "products.json").write_text('{"id": "1"}', encoding="utf-8")
        assert JsonCollectionStore(tmp_path).load("products") == []

    def test_records_without_id_are_skipped(self, tmp_path):
        (tmp_path / "products.json").write_text(
            '[1, "x", {"title": "no id"}, {"id": "7", "title": "ok"}]', encoding="utf-8"
        )
        assert JsonCollectionStore(tmp_path).load("products") == [{"id": "7", "title": "ok"}]

    def test_skipped_records_are_logged(self, tmp_path):
        from loguru import logger

        messages = []
        sink = logger.add(messages.append, level="WARNING")
        try:
            (tmp_path / "carts.json").write_text('[null, {"id": "1"}]', encoding="utf-8")
            JsonCollectionStore(tmp_path).load("carts")
        finally:
            logger.remove(sink)
        assert any("skipped 1 record" in str(m) for m in messages)

    def test_corrupt_file_is_logged(self, tmp_path):
        from loguru import logger

        messages = []
        sink = logger.add(messages.append, level="WARNING")
        try:
            (tmp_path / "carts.json").write_text("garbage", encoding="utf-8")
            JsonCollectionStore(tmp_path).load("carts")
        finally:
            logger.remove(sink)
        assert any("carts" in str(m) for m in messages)


class TestSave:

    def test_round_trip_preserves_order(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        records = [{"id": "2", "b": 1, "a": 2}, {"id": "1"}, {"id": "3", "x": [1, 2]}]
        store.save("products", records)
        assert store.load("products") == records
        assert list(store.load("products")[0]) == ["id", "b", "a"]

    def test_non_finite_numbers_written_as_null(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("carts", [{"id": "1", "products": [
            {"id": "p1", "quantity": float("nan")},
            {"id": "p2", "quantity": float("-inf")},
        ]}])

        def reject(token):
            raise AssertionError(f"non-standard JSON token {token}")

        text = (tmp_path / "carts.json").read_text(encoding="utf-8")
        stored = json.loads(text, parse_constant=reject)
        assert stored[0]["products"] == [
            {"id": "p1", "quantity": None},
            {"id": "p2", "quantity": None},
        ]

    def test_creates_data_dir(self, tmp_path):
        store = JsonCollectionStore(tmp_path / "nested" / "data")
        store.save("carts", [])
        assert (tmp_path / "nested" / "data" / "carts.json").exists()

    def test_writes_indented_json(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("carts", [{"id": "1"}])
        text = (tmp_path / "carts.json").read_text(encoding="utf-8")
        assert text == json.dumps([{"id": "1"}], indent=2) + "\n"

    def test_leaves_no_temp_files(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("carts", [{"id": "1"}])
        store.save("carts", [{"id": "2"}])
        assert [p.name for p in tmp_path.iterdir()] == ["carts.json"]

    def test_collections_are_independent(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("products", [{"id": "p"}])
        store.save("carts", [{"id": "c"}])
        assert store.load("products") == [{"id": "p"}]
        assert store.load("carts") == [{"id": "c"}]


class TestMutate:

    def test_in_place_mutation_saved(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.mutate("carts", lambda records: records.append({"id": "1"}))
        assert store.load("carts") == [{"id": "1"}]

    def test_returned_list_saved(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("carts", [{"id": "1"}, {"id": "2"}])
        store.mutate("carts", lambda records: [r for r in records if r["id"] != "1"])
        assert store.load("carts") == [{"id": "2"}]

    def test_concurrent_mutations_are_not_lost(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        store.save("counters", [{"id": "c", "n": 0}])

        def bump(records):
            records[0]["n"] += 1

        def worker():
            for _ in range(10):
                store.mutate("counters", bump)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.load("counters") == [{"id": "c", "n": 40}]

    def test_lock_is_per_collection_and_reentrant(self, tmp_path):
        store = JsonCollectionStore(tmp_path)
        assert store.lock("a") is store.lock("a")
        assert store.lock("a") is not store.lock("b")
        with store.lock("a"):
            with store.lock("a"):
                store.save("a", [])
