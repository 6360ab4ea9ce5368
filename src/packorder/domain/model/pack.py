"""Pack value object: a fixed number of units sold at a fixed price."""

from __future__ import annotations

from dataclasses import dataclass

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.value_objects import Money


@dataclass(frozen=True)
class Pack:
    """A pack of ``size`` units.

    Sizes must be positive: allocation recurses on ``quantity - size``
    and would never terminate on a zero or negative size.
    """

    size: int
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            raise ValidationError(
                f"Pack size must be an integer, got {type(self.size).__name__}"
            )
        if self.size <= 0:
            raise ValidationError(f"Pack size must be positive, got {self.size}")

    def __str__(self) -> str:
        return f"{self.size} @ {self.price}"

    @staticmethod
    def of(size: int, price: str | float | int) -> Pack:
        return Pack(size=size, price=Money.of(price))
