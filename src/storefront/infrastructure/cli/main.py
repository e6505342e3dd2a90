from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.bootstrap import container
from storefront.infrastructure.cli.cart_commands import cart_add, cart_create, cart_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: product catalog and shopping carts."""
    settings = container().settings
    configure_logging(settings.log_level, settings.log_dir)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default from STOREFRONT_HOST).")
@click.option("--port", type=int, default=None, help="Port (default from STOREFRONT_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API and realtime channel."""
    settings = container().settings
    uvicorn.run(
        create_app(container()),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_create)
cart.add_command(cart_show)
