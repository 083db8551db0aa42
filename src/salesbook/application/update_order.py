"""Application service: Update Order use case (partial merge)."""

from __future__ import annotations

from salesbook.application.dto import OrderDTO, OrderItemSpec
from salesbook.application.mappers import items_from_specs, order_to_dto
from salesbook.domain.exceptions import ValidationError
from salesbook.domain.model.order import OrderStatus
from salesbook.domain.model.value_objects import validate_iso_date
from salesbook.domain.repository.order_repository import OrderChanges, OrderRepository


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: str,
        *,
        customer_id: str | None = None,
        customer_name: str | None = None,
        item_specs: list[OrderItemSpec] | None = None,
        status: str | None = None,
        notes: str | None = None,
        order_date: str | None = None,
        delivery_date: str | None = None,
    ) -> OrderDTO | None:
        """Apply the given fields; arguments left as ``None`` stay unchanged.

        Returns None when the order no longer exists after the write.
        """
        if item_specs is not None and not item_specs:
            raise ValidationError("Order must contain at least one item")
        if customer_id is not None and not customer_id.strip():
            raise ValidationError("Customer ID cannot be blank")
        if order_date is not None:
            validate_iso_date(order_date, "Order date")
        if delivery_date:
            validate_iso_date(delivery_date, "Delivery date")

        changes = OrderChanges(
            customer_id=customer_id.strip() if customer_id is not None else None,
            customer_name=customer_name,
            items=items_from_specs(item_specs) if item_specs is not None else None,
            status=OrderStatus.parse(status) if status is not None else None,
            notes=notes,
            order_date=order_date,
            delivery_date=delivery_date,
        )
        order = self._order_repo.update(order_id, changes)
        return order_to_dto(order) if order is not None else None
