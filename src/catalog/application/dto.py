"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProductFields:
    """Input: the six caller-supplied fields of a new product."""

    title: str
    description: str
    price: float
    thumbnail: str
    code: str
    stock: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
