"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from packorder.domain.exceptions import ErrorKind


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product code + quantity as typed)."""

    product_code: str
    quantity: str


@dataclass(frozen=True)
class PackLineDTO:
    """Output: how many packs of one size go into a line."""

    size: int
    count: int
    unit_price: str  # formatted, e.g. "$8.99"
    line_total: str


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: one priced order line."""

    product_code: str
    product_name: str
    quantity: int
    packs: list[PackLineDTO]
    price: str


@dataclass(frozen=True)
class SubmissionResult:
    """Output: the outcome of submitting an order.

    Either ``lines`` holds every priced item (``ok``), or ``error`` names
    the first reason the order was turned away and ``message`` describes
    it.  There is no partially priced shape.
    """

    order_id: Hashable
    lines: list[OrderLineDTO] = field(default_factory=list)
    total: str = "$0.00"
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_noop(self) -> bool:
        """True when nothing was ordered; not treated as a failure."""
        return self.error is ErrorKind.EMPTY_ORDER

    @property
    def prices(self) -> list[str]:
        return [line.price for line in self.lines]


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: a product and the packs it is sold in."""

    code: str
    name: str
    packs: list[tuple[int, str]]  # (size, formatted price), ascending
