"""Allocation: the outcome of fitting a quantity into a product's packs.

Each call to ``Product.allocate`` returns a fresh Allocation instead of
recording the chosen packs on the product, so two orders for the same
product can never see each other's selection.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.pack import Pack
from packorder.domain.model.value_objects import Money


@dataclass(frozen=True)
class Allocation:
    """Packs selected for ``quantity``.

    ``remainder`` is 0 when the packs add up to the quantity exactly.
    Any other value means no exact combination was found and ``packs``
    is empty.  Packs are listed in the order the search committed to
    them (deepest level first), not by size.
    """

    quantity: int
    packs: tuple[Pack, ...]
    remainder: int

    @property
    def is_complete(self) -> bool:
        return self.remainder == 0

    def calculate(self) -> Money:
        """Total price of the selected packs, rounded to cents."""
        if not self.is_complete:
            raise ValidationError(
                f"Cannot price qty:{self.quantity}, allocation left remainder {self.remainder}"
            )
        return Money.total(pack.price for pack in self.packs).rounded()

    def breakdown(self) -> list[tuple[Pack, int]]:
        """Group the selected packs as ``(pack, count)``, largest pack first."""
        counts = Counter(self.packs)
        return sorted(counts.items(), key=lambda entry: entry[0].size, reverse=True)
