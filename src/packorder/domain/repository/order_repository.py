"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable

from packorder.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: Hashable) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order. Ids are never reused."""
