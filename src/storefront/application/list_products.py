"""Application service: List Products use case (query)."""

from __future__ import annotations

import re

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: str | int | None) -> int | None:
    """Turn a ``?limit=`` value into a positive int, or None for "no limit".

    Leading digits are honoured (``"5abc"`` means 5); anything that does
    not start with a positive integer degrades to no limit.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, limit: str | int | None = None) -> list[Product]:
        products = self._product_repo.list_all()
        count = parse_limit(limit)
        if count is None:
            return products
        return products[:count]
