"""Abstract repository for the product collection.

Defined in the domain layer so the domain never depends on
infrastructure. The store always reads and writes the collection as a
whole, so the interface is whole-collection rather than per-record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def read_all(self) -> list[Product]:
        """Return every product, in stored order.

        A backing store that does not exist yet is an empty collection.
        """

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Replace the stored collection with ``products``."""
