"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import container
from storefront.infrastructure.cli.params import NUMBER


def _display_lines(lines) -> None:
    if not lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'Product':<20} {'Qty':>8}")
    click.echo("-" * 29)
    for line in lines:
        click.echo(f"{line.product_id:<20} {line.quantity!s:>8}")


@click.command("create")
def cart_create() -> None:
    """Create an empty cart."""
    cart = container().create_cart().handle()
    click.echo(f"Cart #{cart.id} created")


@click.command("show")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
def cart_show(cart_id: str) -> None:
    """Show the products in a cart."""
    try:
        cart = container().show_cart().handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lines(cart.products)


@click.command("add")
@click.option("--cart", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=NUMBER, default=1, show_default=True, help="Units to add.")
def cart_add(cart_id: str, product_id: str, quantity) -> None:
    """Add a product to a cart, merging with an existing line."""
    try:
        lines = container().add_product_to_cart().handle(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart_id} now holds:")
    _display_lines(lines)
