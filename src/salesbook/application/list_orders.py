"""Application service: List Orders use case (query)."""

from __future__ import annotations

from salesbook.application.dto import OrderDTO
from salesbook.application.mappers import order_to_dto
from salesbook.domain.model.order import OrderStatus
from salesbook.domain.model.value_objects import validate_iso_date
from salesbook.domain.repository.order_repository import OrderFilter, OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        status: str | None = None,
        customer_id: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[OrderDTO]:
        """Return at most 100 matching orders, newest order date first."""
        if start_date:
            validate_iso_date(start_date, "Start date")
        if end_date:
            validate_iso_date(end_date, "End date")
        order_filter = OrderFilter(
            status=OrderStatus.parse(status) if status else None,
            customer_id=customer_id or None,
            start_date=start_date or None,
            end_date=end_date or None,
        )
        return [order_to_dto(o) for o in self._order_repo.list(order_filter)]
