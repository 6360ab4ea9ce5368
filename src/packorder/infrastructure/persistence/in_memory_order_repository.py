"""In-process implementation of OrderRepository.

Orders live only as long as the process.  Insertion order is kept so
``list_all`` returns orders oldest first.
"""

from __future__ import annotations

from collections.abc import Hashable

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.order import Order
from packorder.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[Hashable, Order] = {}

    def get_by_id(self, order_id: Hashable) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id in self._store:
            raise ValidationError(f"Order {order.id!r} is already stored")
        self._store[order.id] = order
