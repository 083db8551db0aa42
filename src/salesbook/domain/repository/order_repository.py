"""Abstract repository for Order entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from salesbook.domain.model.order import Order, OrderItem, OrderStatus

# Maximum number of orders returned by ``list``.
ORDER_LIST_LIMIT = 100


@dataclass(frozen=True)
class OrderFilter:
    """Optional listing constraints, ANDed together.

    ``start_date`` and ``end_date`` are inclusive bounds on the order date.
    """

    status: OrderStatus | None = None
    customer_id: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass(frozen=True)
class OrderChanges:
    """Partial update. ``None`` leaves a field unchanged; ``""`` clears it.

    When ``items`` is given it replaces the whole item list and the order
    total is recomputed.
    """

    customer_id: str | None = None
    customer_name: str | None = None
    items: list[OrderItem] | None = None
    status: OrderStatus | None = None
    notes: str | None = None
    order_date: str | None = None
    delivery_date: str | None = None


class OrderRepository(ABC):

    @abstractmethod
    def list(self, order_filter: OrderFilter | None = None) -> list[Order]:
        """Return up to ``ORDER_LIST_LIMIT`` orders, newest order date first."""

    @abstractmethod
    def list_between(self, start: str, end: str) -> list[Order]:
        """Return every order dated in ``[start, end)``, oldest first, uncapped."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order and return it with its generated id."""

    @abstractmethod
    def update(self, order_id: str, changes: OrderChanges) -> Order | None:
        """Apply *changes* and return the stored order, or None if it is gone."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove an order. Missing ids are not reported."""
