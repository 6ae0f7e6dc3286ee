import logging
from pathlib import Path

import click

from catalog.infrastructure.bootstrap import FILE_ENV_VAR
from catalog.infrastructure.cli.demo_command import demo
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=FILE_ENV_VAR,
    default=None,
    help="Catalog JSON file (default: data/products.json).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each operation.")
@click.pass_context
def cli(ctx: click.Context, file_path: Path | None, verbose: bool) -> None:
    """Catalog — JSON-backed product catalog"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["file_path"] = file_path


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cli.add_command(demo)
