"""Outbound ports: change notifications and identifier generation.

The application layer depends only on these interfaces; the
infrastructure supplies the concrete implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

PRODUCT_CREATED = "newProduct"


class ChangeNotifier(ABC):

    @abstractmethod
    def publish(self, event: str, payload: Any) -> None:
        """Deliver *payload* to every currently connected observer.

        Best effort: observers that cannot be reached are skipped and
        the caller is never told.
        """


class IdGenerator(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Return an identifier distinct from every one issued before."""
