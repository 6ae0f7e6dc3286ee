"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import TEXT_FIELDS, Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def read_all(self) -> list[Product]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("%s does not exist yet, starting empty", self._file_path)
            return []
        except OSError as exc:
            raise StorageError(f"Could not read {self._file_path}: {exc}") from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Malformed JSON in {self._file_path}: {exc}") from exc

        if not isinstance(raw, list):
            raise StorageError(f"Expected a JSON array in {self._file_path}")

        products = [self._to_domain(item) for item in raw]
        logger.debug("Read %d product(s) from %s", len(products), self._file_path)
        return products

    def save_all(self, products: list[Product]) -> None:
        raw = [self._to_raw(p) for p in products]
        try:
            text = json.dumps(raw, indent=2, allow_nan=False) + "\n"
        except ValueError as exc:
            raise StorageError(
                f"Could not serialize products for {self._file_path}: {exc}"
            ) from exc

        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not write {self._file_path}: {exc}") from exc
        logger.info("Saved %d product(s) to %s", len(products), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "description": product.description,
            "price": product.price,
            "thumbnail": product.thumbnail,
            "code": product.code,
            "stock": product.stock,
        }

    def _to_domain(self, raw: object) -> Product:
        if not isinstance(raw, dict):
            raise StorageError(f"Expected product objects in {self._file_path}")
        try:
            product = Product(
                id=raw["id"],
                title=raw["title"],
                description=raw["description"],
                price=raw["price"],
                thumbnail=raw["thumbnail"],
                code=raw["code"],
                stock=raw["stock"],
            )
        except KeyError as exc:
            raise StorageError(
                f"Product record in {self._file_path} is missing key {exc}"
            ) from exc
        self._check_types(product)
        return product

    def _check_types(self, product: Product) -> None:
        """Reject records whose values have the wrong JSON type."""
        bad = [
            name
            for name, value in (("id", product.id), ("stock", product.stock))
            if isinstance(value, bool) or not isinstance(value, int)
        ]
        if (
            isinstance(product.price, bool)
            or not isinstance(product.price, (int, float))
            or not math.isfinite(product.price)
        ):
            bad.append("price")
        bad.extend(
            name for name in TEXT_FIELDS if not isinstance(getattr(product, name), str)
        )
        if bad:
            raise StorageError(
                f"Product record in {self._file_path} has invalid "
                f"{', '.join(bad)}"
            )
