"""Order entity and its embedded line items.

Line subtotals and the order total are derived values: they are computed
here whenever items are written and never taken from the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Union

from salesbook.domain.exceptions import ValidationError
from salesbook.domain.model.value_objects import validate_iso_date

Amount = Union[int, float]


class OrderStatus(Enum):
    """Order progress. Any status may be set from any other."""

    RECEIVED = "received"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DELIVERED = "delivered"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()

    @staticmethod
    def parse(value: str | OrderStatus) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(value)
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status {value!r}; expected one of {allowed}"
            ) from exc


@dataclass(frozen=True)
class OrderItem:
    """One line of an order. ``subtotal`` is ``quantity * unit_price``."""

    product_name: str
    quantity: int
    unit_price: Amount
    subtotal: Amount

    @staticmethod
    def priced(product_name: str, quantity: int, unit_price: Amount) -> OrderItem:
        """Build a line item, deriving its subtotal."""
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required for every item")
        return OrderItem(
            product_name=product_name.strip(),
            quantity=quantity,
            unit_price=unit_price,
            subtotal=quantity * unit_price,
        )


def total_of(items: Iterable[OrderItem]) -> Amount:
    return sum(item.subtotal for item in items)


@dataclass
class Order:
    """A customer order.

    ``customer_name`` is a snapshot taken when the order is written and is
    not kept in sync with later customer renames.
    """

    id: str | None
    customer_id: str
    customer_name: str
    items: list[OrderItem]
    order_date: str
    total_amount: Amount = 0
    status: OrderStatus = OrderStatus.RECEIVED
    notes: str = ""
    delivery_date: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        customer_name: str,
        items: list[OrderItem],
        order_date: str,
        status: str | OrderStatus | None = None,
        notes: str = "",
        delivery_date: str = "",
    ) -> Order:
        """Create a new order, validating input and deriving the total."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer ID is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        validate_iso_date(order_date, "Order date")
        if delivery_date:
            validate_iso_date(delivery_date, "Delivery date")

        return Order(
            id=None,
            customer_id=customer_id.strip(),
            customer_name=customer_name or "",
            items=list(items),
            order_date=order_date,
            total_amount=total_of(items),
            status=OrderStatus.parse(status) if status else OrderStatus.RECEIVED,
            notes=notes or "",
            delivery_date=delivery_date or "",
        )
