"""Cart aggregate.

A cart owns an ordered list of line items. Each line references a
product id only; the cart never checks that the product exists.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ValidationError


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class CartLine:
    """A ``{id, quantity}`` pair. Quantity is taken as given."""

    product_id: str
    quantity: Any

    @staticmethod
    def from_mapping(raw: Any) -> CartLine:
        if not isinstance(raw, Mapping) or "id" not in raw:
            raise ValidationError("Cart line must be an object with an 'id'")
        return CartLine(product_id=str(raw["id"]), quantity=raw.get("quantity"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.product_id, "quantity": self.quantity}


@dataclass
class Cart:
    """Aggregate root for a shopping cart.

    ``extra`` holds any additional fields supplied when the cart was
    created; they are stored alongside ``id`` and ``products``.
    """

    id: str
    products: list[CartLine] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(cart_id: str, overrides: Mapping[str, Any] | None = None) -> Cart:
        """Start an empty cart, then overlay caller-supplied fields.

        A supplied ``products`` list replaces the empty default, but every
        line in it must carry an ``id`` and a numeric ``quantity``. The
        store-assigned ``id`` always wins.
        """
        raw: dict[str, Any] = {"id": cart_id, "products": []}
        raw.update(overrides or {})
        raw["id"] = cart_id

        cart = Cart.from_mapping(raw)
        for line in cart.products:
            if not is_number(line.quantity):
                raise ValidationError(
                    f"Cart line '{line.product_id}' needs a numeric quantity"
                )
        return cart

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> Cart:
        lines = raw.get("products")
        if lines is None:
            lines = []
        if not isinstance(lines, list):
            raise ValidationError("Cart products must be a list")
        return Cart(
            id=str(raw["id"]),
            products=[CartLine.from_mapping(line) for line in lines],
            extra={k: v for k, v in raw.items() if k not in ("id", "products")},
        )

    # --- Behaviour ------------------------------------------------------------

    def add_product(self, product_id: str, quantity: Any) -> list[CartLine]:
        """Merge *quantity* units of *product_id* into the cart.

        An existing line for the product has its quantity incremented;
        otherwise a new line is appended. No bounds are enforced on
        either the increment or the resulting quantity. A stored quantity
        that is not a number (``null`` once NaN has been persisted)
        counts as zero.
        """
        for line in self.products:
            if line.product_id == product_id:
                current = line.quantity if is_number(line.quantity) else 0
                line.quantity = current + quantity
                break
        else:
            self.products.append(CartLine(product_id=product_id, quantity=quantity))
        return self.products

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "products": [line.to_dict() for line in self.products],
        }
        data.update(self.extra)
        return data
