"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from packorder.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return a product by its exact code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
