"""Durable store for named JSON collections.

Each collection is one JSON array in ``<data_dir>/<name>.json``. The whole
array is the unit of durability: every write replaces the file.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from storefront.infrastructure.json_values import finite_or_null

Record = dict[str, Any]


class JsonCollectionStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def lock(self, name: str) -> threading.RLock:
        """Return the re-entrant lock guarding collection *name*.

        Hold it across a load, mutate and save so that concurrent writers
        of the same collection cannot lose each other's updates.
        """
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.RLock()
            return lock

    # --- Reads ----------------------------------------------------------------

    def load(self, name: str) -> list[Record]:
        """Return the records of *name*, or ``[]`` if there are none.

        A missing file is normal (nothing written yet). An unreadable or
        malformed file is also treated as empty, and a record that is not
        an object with an ``id`` is skipped. Both are logged so that lost
        data does not pass for an empty catalog.
        """
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Collection {} has no backing file at {}", name, path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Collection {} unreadable at {}: {}; treating as empty", name, path, exc)
            return []

        try:
            records = json.loads(text)
        except ValueError as exc:
            logger.warning("Collection {} is not valid JSON at {}: {}; treating as empty", name, path, exc)
            return []

        if not isinstance(records, list):
            logger.warning(
                "Collection {} at {} holds a {} instead of a list; treating as empty",
                name, path, type(records).__name__,
            )
            return []

        kept = [r for r in records if isinstance(r, dict) and "id" in r]
        if len(kept) != len(records):
            logger.warning(
                "Collection {} at {}: skipped {} record(s) that are not objects with an id",
                name, path, len(records) - len(kept),
            )
        return kept

    # --- Writes ---------------------------------------------------------------

    def save(self, name: str, records: list[Record]) -> None:
        """Atomically replace collection *name* with *records*.

        NaN and infinities are written as ``null`` so the file stays
        strict JSON.
        """
        path = self.path_for(name)
        payload = json.dumps(finite_or_null(records), indent=2, allow_nan=False) + "\n"

        with self.lock(name):
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise

        logger.debug("Saved {} record(s) to collection {}", len(records), name)

    def mutate(
        self,
        name: str,
        mutator: Callable[[list[Record]], list[Record] | None],
    ) -> list[Record]:
        """Load, mutate and save *name* as one serialized step.

        *mutator* may edit the list in place (and return ``None``) or
        return a replacement list. Returns the records that were saved.
        """
        with self.lock(name):
            records = self.load(name)
            result = mutator(records)
            if result is not None:
                records = list(result)
            self.save(name, records)
            return records
