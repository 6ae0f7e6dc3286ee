"""Walkthrough command exercising every store operation in sequence."""

from __future__ import annotations

import click

from catalog.application.dto import ProductFields
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_store
from catalog.infrastructure.cli.product_commands import display_product, display_products

SAMPLE_PRODUCTS = (
    ProductFields(
        title="Test product",
        description="This is a test product",
        price=200,
        thumbnail="No image",
        code="abc123",
        stock=25,
    ),
    ProductFields(
        title="Test product 2",
        description="This is another test product",
        price=250,
        thumbnail="No image",
        code="def456",
        stock=20,
    ),
)


@click.command("demo")
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Add, show, update and delete sample products."""
    store = product_store((ctx.obj or {}).get("file_path"))

    try:
        display_products(store.list())

        created = [store.create(fields) for fields in SAMPLE_PRODUCTS]
        click.echo(f"Added {len(created)} products.")
        display_products(store.list())

        first_id = created[0].id
        display_product(store.get_by_id(first_id))

        store.update(first_id, {"title": "Updated product", "price": 300})
        click.echo(f"Product #{first_id} updated.")
        display_products(store.list())

        store.delete(first_id)
        click.echo(f"Product #{first_id} deleted.")
        display_products(store.list())
    except DomainException as exc:
        raise click.ClickException(str(exc))
