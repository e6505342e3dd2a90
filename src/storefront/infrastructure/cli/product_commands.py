"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import container
from storefront.infrastructure.cli.params import NUMBER


def _product_fields(**options) -> dict:
    """Collect the given options into a product payload, skipping unset ones."""
    thumbnails = options.pop("thumbnails")
    data = {name: value for name, value in options.items() if value is not None}
    if thumbnails:
        data["thumbnails"] = list(thumbnails)
    return data


def _product_options(required: bool):
    """Decorate a command with the catalog field options."""

    def decorator(func):
        for option in reversed([
            click.option("--title", required=required, help="Product title."),
            click.option("--description", required=required, help="Description."),
            click.option("--code", required=required, help="Product code."),
            click.option("--price", type=NUMBER, required=required, help="Price."),
            click.option("--stock", type=NUMBER, required=required, help="Units in stock."),
            click.option("--category", required=required, help="Category."),
            click.option(
                "--thumbnail", "thumbnails", multiple=True,
                help="Thumbnail path; repeat for several.",
            ),
        ]):
            func = option(func)
        return func

    return decorator


@click.command("list")
@click.option("--limit", default=None, help="Show only the first N products.")
def product_list(limit: str | None) -> None:
    """List products in the catalog."""
    products = container().list_products().handle(limit)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<15} {'Code':<10} {'Title':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.id:<15} {str(p.code or ''):<10} {str(p.title or ''):<24} "
            f"{str(p.price if p.price is not None else ''):>10} "
            f"{str(p.stock if p.stock is not None else ''):>7}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show every stored field of a product."""
    try:
        product = container().show_product().handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for key, value in product.to_dict().items():
        click.echo(f"{key + ':':<14} {value}")


@click.command("add")
@_product_options(required=True)
def product_add(**options) -> None:
    """Add a new product to the catalog."""
    data = _product_fields(**options)
    data.setdefault("thumbnails", [])
    try:
        product = container().add_product().handle(data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@_product_options(required=False)
def product_update(product_id: str, **options) -> None:
    """Replace a product. Fields not given are removed."""
    try:
        container().update_product().handle(product_id, _product_fields(**options))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        container().delete_product().handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
