"""Order aggregate.

An Order groups the items a customer asked for under one id.  It is
built in a single step by ``Order.create`` and never changes afterwards.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from packorder.domain.exceptions import EmptyOrderError
from packorder.domain.model.product import Product
from packorder.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class OrderItem:
    """A requested quantity of one product."""

    product: Product
    quantity: Quantity

    @property
    def code(self) -> str:
        return self.product.code


@dataclass(frozen=True)
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders.
    """

    id: Hashable
    items: tuple[OrderItem, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(order_id: Hashable, items: Iterable[OrderItem]) -> Order:
        items = tuple(items)
        if not items:
            raise EmptyOrderError("No items found!")
        return Order(id=order_id, items=items)
