"""Product aggregate.

A product is created with six business fields and an id assigned by the
store. After creation it may be changed field by field; the id never
changes.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from catalog.domain.exceptions import ValidationError

# Order matters: it is the key order of the persisted records.
BUSINESS_FIELDS = ("title", "description", "price", "thumbnail", "code", "stock")
TEXT_FIELDS = ("title", "description", "thumbnail", "code")


@dataclass
class Product:
    """A product in the catalog."""

    id: int
    title: str
    description: str
    price: float
    thumbnail: str
    code: str
    stock: int

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """Overwrite the supplied fields, leaving the rest untouched.

        An ``id`` key is ignored. Unknown keys are rejected before
        anything is modified.
        """
        unknown = sorted(set(changes) - set(BUSINESS_FIELDS) - {"id"})
        if unknown:
            raise ValidationError(f"Unknown product field(s): {', '.join(unknown)}")

        for name, value in changes.items():
            if name == "id":
                continue
            setattr(self, name, value)

    def business_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in BUSINESS_FIELDS}


def validate_business_fields(fields: Mapping[str, Any]) -> None:
    """Reject a field set where any business field is missing or falsy.

    Numeric zero counts as missing, as does a whitespace-only string.
    """
    missing = [name for name in BUSINESS_FIELDS if not _is_present(fields.get(name))]
    if missing:
        raise ValidationError(
            f"All fields are required; missing or empty: {', '.join(missing)}"
        )

    for name in TEXT_FIELDS:
        if not isinstance(fields[name], str):
            raise ValidationError(
                f"Product {name} must be text, got {type(fields[name]).__name__}"
            )

    price = fields["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValidationError(f"Product price must be a number, got {price!r}")
    if not math.isfinite(price):
        raise ValidationError(f"Product price must be a finite number, got {price}")
    if price < 0:
        raise ValidationError(f"Product price must be greater than zero, got {price}")

    stock = fields["stock"]
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ValidationError(f"Product stock must be an integer, got {stock!r}")
    if stock < 0:
        raise ValidationError(f"Product stock must be greater than zero, got {stock}")


def _is_present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)
