"""Application service: CRUD access to the product catalog.

Every operation re-reads the collection through the repository, so the
backing file is the source of truth. Mutations write the whole
collection back before returning.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.dto import ProductFields
from catalog.domain.exceptions import DuplicateCodeError, NotFoundError
from catalog.domain.model.product import Product, validate_business_fields
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        revalidate_on_update: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._revalidate_on_update = revalidate_on_update

    # --- Commands -------------------------------------------------------------

    def create(self, fields: ProductFields | Mapping[str, Any]) -> Product:
        """Add a new product and return it with its assigned id."""
        if isinstance(fields, ProductFields):
            fields = fields.as_dict()
        validate_business_fields(fields)

        products = self.read_products_file()
        code = fields["code"]
        if any(p.code == code for p in products):
            logger.warning("Rejected product with duplicate code %r", code)
            raise DuplicateCodeError(f"Product code '{code}' already exists")

        # Next id is derived from content, so ids are never reused while
        # a higher one is still stored.
        next_id = max(p.id for p in products) + 1 if products else 1

        product = Product(
            id=next_id,
            title=fields["title"],
            description=fields["description"],
            price=fields["price"],
            thumbnail=fields["thumbnail"],
            code=code,
            stock=fields["stock"],
        )
        products.append(product)
        self.save_products_file(products)
        logger.info("Created product #%d (%s)", product.id, product.code)
        return product

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        """Merge ``changes`` into an existing product.

        By default the merged record is not re-validated; pass
        ``revalidate_on_update=True`` to the store to require non-empty
        fields and a unique code after the merge.
        """
        products = self.read_products_file()
        product = self._find(products, product_id)
        if product is None:
            logger.warning("Update of missing product #%s", product_id)
            raise NotFoundError(f"Product with ID {product_id} not found")

        if self._revalidate_on_update:
            merged = {**product.business_fields(), **changes}
            validate_business_fields(merged)
            if any(p.code == merged["code"] and p.id != product.id for p in products):
                raise DuplicateCodeError(
                    f"Product code '{merged['code']}' already exists"
                )

        product.apply_changes(changes)
        self.save_products_file(products)
        logger.info("Updated product #%d", product.id)
        return product

    def delete(self, product_id: int) -> None:
        """Remove a product. Deleting an unknown id is a no-op."""
        products = self.read_products_file()
        remaining = [p for p in products if p.id != product_id]
        self.save_products_file(remaining)
        if len(remaining) < len(products):
            logger.info("Deleted product #%s", product_id)
        else:
            logger.info("Product #%s already absent, nothing deleted", product_id)

    # --- Queries --------------------------------------------------------------

    def list(self) -> list[Product]:
        return self.read_products_file()

    def get_by_id(self, product_id: int) -> Product:
        product = self._find(self.read_products_file(), product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    # --- Persistence ----------------------------------------------------------

    def read_products_file(self) -> list[Product]:
        return self._product_repo.read_all()

    def save_products_file(self, products: list[Product]) -> None:
        self._product_repo.save_all(products)

    @staticmethod
    def _find(products: list[Product], product_id: int) -> Product | None:
        for product in products:
            if product.id == product_id:
                return product
        return None
