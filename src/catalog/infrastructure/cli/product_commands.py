"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.dto import ProductFields
from catalog.application.product_store import ProductStore
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_store


def _store(ctx: click.Context, revalidate: bool = False) -> ProductStore:
    file_path = (ctx.obj or {}).get("file_path")
    return product_store(file_path, revalidate_on_update=revalidate)


def display_products(products: list[Product]) -> None:
    """Shared table formatting for a list of products."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Title':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 63)
    for p in products:
        click.echo(f"{p.id:<6} {p.code:<12} {p.title:<24} {p.price:>10.2f} {p.stock:>7}")


def display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}  (code={p.code})")
    click.echo(f"Title:       {p.title}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Price:       {p.price:.2f}")
    click.echo(f"Thumbnail:   {p.thumbnail}")
    click.echo(f"Stock:       {p.stock}")


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--thumbnail", required=True, help="Image reference or placeholder.")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_context
def product_add(
    ctx: click.Context,
    title: str,
    description: str,
    price: float,
    thumbnail: str,
    code: str,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    fields = ProductFields(
        title=title,
        description=description,
        price=price,
        thumbnail=thumbnail,
        code=code,
        stock=stock,
    )

    try:
        product = _store(ctx).create(fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added (code={product.code})")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""
    try:
        products = _store(ctx).list()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_products(products)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
@click.pass_context
def product_show(ctx: click.Context, product_id: int) -> None:
    """Show a single product."""
    try:
        product = _store(ctx).get_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, type=float, help="New price.")
@click.option("--thumbnail", default=None, help="New thumbnail.")
@click.option("--code", default=None, help="New product code.")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Reject empty values and duplicate codes in the updated product.",
)
@click.pass_context
def product_update(ctx: click.Context, product_id: int, strict: bool, **options) -> None:
    """Update one or more fields of a product."""
    changes = {name: value for name, value in options.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update; pass at least one field option.")

    try:
        product = _store(ctx, revalidate=strict).update(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: {', '.join(sorted(changes))}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to delete.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        _store(ctx).delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
