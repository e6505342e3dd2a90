"""Time-based identifier generation."""

from __future__ import annotations

import threading
import time

from storefront.domain.ports import IdGenerator


class TimestampIdGenerator(IdGenerator):
    """Millisecond timestamps as decimal strings.

    Two calls in the same millisecond (or a clock stepping backwards)
    would collide, so each id is bumped past the previous one.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            candidate = int(time.time() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)
