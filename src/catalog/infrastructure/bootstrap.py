"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.application.product_store import ProductStore
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

FILE_ENV_VAR = "CATALOG_FILE"

# Relative to the working directory of the process.
_DEFAULT_FILE = Path("data") / "products.json"


def products_file() -> Path:
    """Resolve the catalog file from the environment or the default."""
    return Path(os.environ.get(FILE_ENV_VAR) or _DEFAULT_FILE)


def product_repository(file_path: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(file_path or products_file())


def product_store(
    file_path: Path | None = None, revalidate_on_update: bool = False
) -> ProductStore:
    return ProductStore(
        product_repo=product_repository(file_path),
        revalidate_on_update=revalidate_on_update,
    )
