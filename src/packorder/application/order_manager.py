"""Application service: Order Manager.

Validates order submissions against the catalog, packs and prices each
item, and keeps the accepted orders.  This is the boundary where order
rejections stop being exceptions: ``submit_order`` always returns a
``SubmissionResult``.

Checks run in a fixed order and the first failure wins:
1. the order id must be new;
2. every item is validated in turn (quantity, product code, minimum pack,
   then the optional maximum quantity);
3. every item is packed and priced in turn.
The order is stored only after all three passes succeed.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable

from packorder.application.dto import (
    OrderItemSpec,
    OrderLineDTO,
    PackLineDTO,
    SubmissionResult,
)
from packorder.domain.exceptions import (
    DuplicateOrderIdError,
    ErrorKind,
    InvalidQuantityError,
    OrderRejectedError,
    QuantityAboveMaximumError,
    QuantityBelowMinimumPackError,
    UnknownProductCodeError,
    UnserviceableQuantityError,
    ValidationError,
)
from packorder.domain.model.allocation import Allocation
from packorder.domain.model.order import Order, OrderItem
from packorder.domain.model.value_objects import Money, Quantity
from packorder.domain.repository.order_repository import OrderRepository
from packorder.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class OrderManager:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        max_quantity: int | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._max_quantity = max_quantity

    def submit_order(
        self, order_id: Hashable, items: Iterable[OrderItemSpec]
    ) -> SubmissionResult:
        """Validate, pack and price an order, then store it under ``order_id``."""
        try:
            order = self._build_order(order_id, list(items))
            allocations = self.package_order(order)
        except OrderRejectedError as exc:
            if exc.kind is ErrorKind.EMPTY_ORDER:
                logger.info("Order %r has no items, nothing to do", order_id)
            else:
                logger.info("Order %r rejected: %s", order_id, exc)
            return SubmissionResult(order_id=order_id, error=exc.kind, message=str(exc))

        self._order_repo.save(order)
        lines = [
            self._to_line(item, allocation)
            for item, allocation in zip(order.items, allocations)
        ]
        total = Money.total(allocation.calculate() for allocation in allocations)
        logger.info("Order %r accepted: %d item(s), %s", order_id, len(lines), total)
        return SubmissionResult(order_id=order_id, lines=lines, total=str(total))

    def package_order(self, order: Order) -> list[Allocation]:
        """Pack every item of ``order`` in insertion order.

        Raises UnserviceableQuantityError for the first item whose
        quantity cannot be made up exactly from its product's packs.
        """
        allocations: list[Allocation] = []
        for item in order.items:
            allocation = item.product.allocate(item.quantity.value)
            if not allocation.is_complete:
                raise UnserviceableQuantityError(
                    f"Requested qty:{item.quantity} cannot be serviced by existing pack sizes!"
                )
            allocations.append(allocation)
        return allocations

    def get_order(self, order_id: Hashable) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def list_orders(self) -> list[Order]:
        return self._order_repo.list_all()

    # --- Validation -----------------------------------------------------------

    def _build_order(self, order_id: Hashable, specs: list[OrderItemSpec]) -> Order:
        if self._order_repo.get_by_id(order_id) is not None:
            raise DuplicateOrderIdError("Order id already exists!")

        items = [self._build_item(spec) for spec in specs]
        return Order.create(order_id, items)

    def _build_item(self, spec: OrderItemSpec) -> OrderItem:
        code, raw_qty = spec.product_code, spec.quantity
        try:
            quantity = Quantity.parse(raw_qty)
        except ValidationError as exc:
            raise InvalidQuantityError(f"Invalid order qty:{raw_qty} for {code}") from exc

        product = self._product_repo.get_by_code(code)
        if product is None:
            raise UnknownProductCodeError(f"Invalid product code:{code}!")

        if quantity.value < product.min_pack_size:
            raise QuantityBelowMinimumPackError(
                f"Cannot service order as qty:{quantity} is less than "
                f"the minimum sized pack:{product.min_pack_size}!"
            )

        if self._max_quantity is not None and quantity.value > self._max_quantity:
            raise QuantityAboveMaximumError(
                f"Cannot service order as qty:{quantity} exceeds "
                f"the maximum order qty:{self._max_quantity}!"
            )

        return OrderItem(product=product, quantity=quantity)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_line(item: OrderItem, allocation: Allocation) -> OrderLineDTO:
        return OrderLineDTO(
            product_code=item.product.code,
            product_name=item.product.name,
            quantity=item.quantity.value,
            packs=[
                PackLineDTO(
                    size=pack.size,
                    count=count,
                    unit_price=str(pack.price),
                    line_total=str(pack.price * count),
                )
                for pack, count in allocation.breakdown()
            ],
            price=str(allocation.calculate()),
        )
