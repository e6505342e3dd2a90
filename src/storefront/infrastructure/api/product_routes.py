"""HTTP routes for the product catalog."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from storefront.infrastructure.api.dependencies import get_container
from storefront.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(
    limit: str | None = None,
    container: Container = Depends(get_container),
):
    """List the catalog, optionally only the first ``limit`` products."""
    products = container.list_products().handle(limit)
    return {"products": [p.to_dict() for p in products]}


@router.get("/{product_id}")
def get_product(product_id: str, container: Container = Depends(get_container)):
    product = container.show_product().handle(product_id)
    return {"product": product.to_dict()}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    data: dict[str, Any] | None = Body(default=None),
    container: Container = Depends(get_container),
):
    """Add a product; connected realtime clients are told about it."""
    product = container.add_product().handle(data or {})
    return {"message": "Product added", "product": product.to_dict()}


@router.put("/{product_id}")
def update_product(
    product_id: str,
    data: dict[str, Any] | None = Body(default=None),
    container: Container = Depends(get_container),
):
    """Replace a product wholesale, keeping its id."""
    product = container.update_product().handle(product_id, data or {})
    return {"message": "Product updated", "product": product.to_dict()}


@router.delete("/{product_id}")
def delete_product(product_id: str, container: Container = Depends(get_container)):
    container.delete_product().handle(product_id)
    return {"message": "Product deleted"}
