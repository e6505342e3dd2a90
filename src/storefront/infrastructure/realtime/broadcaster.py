"""In-process, best-effort broadcast of change events."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from loguru import logger

from storefront.domain.ports import ChangeNotifier

Subscriber = Callable[[str, Any], None]


class BroadcastNotifier(ChangeNotifier):
    """Fan-out of published events to whoever is subscribed right now.

    Nothing is buffered: a subscriber added after a publish never sees
    that event. A subscriber that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback*; return a function that unregisters it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, event: str, payload: Any) -> None:
        with self._lock:
            targets = list(self._subscribers)

        for callback in targets:
            try:
                callback(event, payload)
            except Exception as exc:
                logger.warning("Dropped {} event for a subscriber: {}", event, exc)

        logger.debug("Published {} to {} subscriber(s)", event, len(targets))
