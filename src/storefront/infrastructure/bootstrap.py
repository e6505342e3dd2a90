"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from storefront.application.add_product import AddProductHandler
from storefront.application.add_product_to_cart import AddProductToCartHandler
from storefront.application.create_cart import CreateCartHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.config import Settings
from storefront.infrastructure.ids import TimestampIdGenerator
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.realtime.broadcaster import BroadcastNotifier


@dataclass
class Container:
    """Every long-lived collaborator of one running process."""

    settings: Settings
    store: JsonCollectionStore
    product_repo: JsonProductRepository
    cart_repo: JsonCartRepository
    notifier: BroadcastNotifier
    id_generator: TimestampIdGenerator

    # --- Use cases ------------------------------------------------------------

    def list_products(self) -> ListProductsHandler:
        return ListProductsHandler(self.product_repo)

    def show_product(self) -> ShowProductHandler:
        return ShowProductHandler(self.product_repo)

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.product_repo, self.notifier, self.id_generator)

    def update_product(self) -> UpdateProductHandler:
        return UpdateProductHandler(self.product_repo)

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(self.product_repo)

    def create_cart(self) -> CreateCartHandler:
        return CreateCartHandler(self.cart_repo, self.id_generator)

    def show_cart(self) -> ShowCartHandler:
        return ShowCartHandler(self.cart_repo)

    def add_product_to_cart(self) -> AddProductToCartHandler:
        return AddProductToCartHandler(self.cart_repo)


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    store = JsonCollectionStore(settings.data_dir)
    return Container(
        settings=settings,
        store=store,
        product_repo=JsonProductRepository(store),
        cart_repo=JsonCartRepository(store),
        notifier=BroadcastNotifier(),
        id_generator=TimestampIdGenerator(),
    )


@lru_cache(maxsize=1)
def container() -> Container:
    """The process-wide container, built from the environment on first use."""
    return build_container()
