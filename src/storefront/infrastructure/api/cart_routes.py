"""HTTP routes for carts and their line items."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from storefront.infrastructure.api.dependencies import get_container
from storefront.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/carts", tags=["carts"])


class AddToCartRequest(BaseModel):
    quantity: int | float


@router.post("", status_code=status.HTTP_201_CREATED)
def create_cart(
    overrides: dict[str, Any] | None = Body(default=None),
    container: Container = Depends(get_container),
):
    cart = container.create_cart().handle(overrides)
    return {"message": "Cart created", "cart": cart.to_dict()}


@router.get("/{cart_id}")
def get_cart(cart_id: str, container: Container = Depends(get_container)):
    """Return the line items of a cart."""
    cart = container.show_cart().handle(cart_id)
    return {"products": [line.to_dict() for line in cart.products]}


@router.post("/{cart_id}/product/{product_id}")
def add_product_to_cart(
    cart_id: str,
    product_id: str,
    data: AddToCartRequest,
    container: Container = Depends(get_container),
):
    """Add ``quantity`` of a product, merging with an existing line."""
    lines = container.add_product_to_cart().handle(cart_id, product_id, data.quantity)
    return {
        "message": "Product added to cart",
        "cart": [line.to_dict() for line in lines],
    }
