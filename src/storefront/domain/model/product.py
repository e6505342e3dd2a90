"""Product aggregate.

Products are flat catalog documents. Beyond the known catalog fields a
product keeps any extra keys the caller supplied, so a stored record
always round-trips unchanged.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from storefront.domain.exceptions import ValidationError

REQUIRED_FIELDS = (
    "title",
    "description",
    "code",
    "price",
    "stock",
    "category",
    "thumbnails",
)


def is_blank(value: Any) -> bool:
    """True for values a catalog form would treat as "not filled in".

    ``None``, ``False``, the empty string, numeric zero and NaN are blank.
    Collections are never blank, so ``thumbnails=[]`` counts as present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


@dataclass
class Product:
    """A product in the catalog.

    ``Product.create()`` is the only path that validates; the plain
    constructor and ``from_mapping()`` reconstitute whatever is stored.
    Fields that are ``None`` are absent and are not persisted, unless they
    were explicitly null in the mapping (tracked in ``null_fields``).
    """

    id: str
    title: str | None = None
    description: str | None = None
    code: str | None = None
    price: float | None = None
    stock: float | None = None
    category: str | None = None
    thumbnails: list[str] | None = None
    status: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    null_fields: set[str] = field(default_factory=set)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(product_id: str, data: Mapping[str, Any]) -> Product:
        """Build a new catalog entry, enforcing the required fields."""
        missing = [name for name in REQUIRED_FIELDS if is_blank(data.get(name))]
        if missing:
            raise ValidationError(
                f"Missing required product fields: {', '.join(missing)}"
            )
        product = Product.from_mapping({**data, "id": product_id})
        product.status = True
        return product

    @staticmethod
    def replace(product_id: str, data: Mapping[str, Any]) -> Product:
        """Build the record that wholly replaces an existing product.

        Nothing from the previous record survives except the ``id``,
        which is always the one the caller addressed.
        """
        return Product.from_mapping({**data, "id": product_id})

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> Product:
        known = {f.name for f in fields(Product)} - {"extra", "null_fields"}
        return Product(
            id=str(raw["id"]),
            **{k: v for k, v in raw.items() if k in known and k != "id"},
            extra={k: v for k, v in raw.items() if k not in known},
            null_fields={k for k, v in raw.items() if k in known and v is None},
        )

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        for f in fields(self):
            if f.name in ("id", "extra", "null_fields"):
                continue
            value = getattr(self, f.name)
            if value is not None or f.name in self.null_fields:
                data[f.name] = value
        data.update(self.extra)
        return data
