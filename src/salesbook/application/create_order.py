"""Application service: Create Order use case.

Every input check happens before the repository is touched, so a rejected
order never reaches the store.
"""

from __future__ import annotations

from salesbook.application.dto import OrderDTO, OrderItemSpec
from salesbook.application.mappers import items_from_specs, order_to_dto
from salesbook.domain.model.order import Order
from salesbook.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_id: str,
        customer_name: str,
        item_specs: list[OrderItemSpec],
        order_date: str,
        status: str | None = None,
        notes: str = "",
        delivery_date: str = "",
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Price every line (subtotal = quantity * unit price).
        2. Let the Order entity validate input and derive the total.
        3. Persist and return a DTO.
        """
        order = Order.create(
            customer_id=customer_id,
            customer_name=customer_name,
            items=items_from_specs(item_specs),
            order_date=order_date,
            status=status,
            notes=notes,
            delivery_date=delivery_date,
        )
        self._order_repo.add(order)
        return order_to_dto(order)
