"""Product aggregate.

Products are created once when the catalog is built and are read-only
afterwards.  Each one offers a fixed set of packs, kept sorted by size.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.allocation import Allocation
from packorder.domain.model.pack import Pack
from packorder.domain.service.pack_allocator import allocate_packs


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Invariants:
    - ``code`` is non-empty
    - ``packs`` is non-empty and sorted ascending by size
    """

    code: str
    name: str
    packs: tuple[Pack, ...]

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValidationError("Product code is required")
        if not self.packs:
            raise ValidationError(f"Product {self.code} must offer at least one pack")
        object.__setattr__(
            self, "packs", tuple(sorted(self.packs, key=lambda pack: pack.size))
        )

    @property
    def min_pack_size(self) -> int:
        return self.packs[0].size

    def allocate(self, quantity: int) -> Allocation:
        """Fit ``quantity`` into this product's packs (see ``allocate_packs``)."""
        return allocate_packs(self.packs, quantity)

    @staticmethod
    def create(code: str, name: str, packs: Iterable[tuple[int, str | float]]) -> Product:
        """Build a product from ``(size, price)`` pairs in any order."""
        return Product(
            code=code.strip(),
            name=name.strip(),
            packs=tuple(Pack.of(size, price) for size, price in packs),
        )
