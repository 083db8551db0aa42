"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are left as the
numbers they were entered as; formatting is up to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

Amount = Union[int, float]


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one line as entered (no subtotal, that is always derived)."""

    product_name: str
    quantity: int
    unit_price: Amount


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    quantity: int
    unit_price: Amount
    subtotal: Amount


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    status: str
    status_label: str
    items: list[OrderItemDTO]
    total_amount: Amount
    notes: str
    order_date: str
    delivery_date: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    rank: str
    rank_label: str
    phone: str
    email: str
    address: str
    notes: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductRollupDTO:
    product_name: str
    quantity: int
    subtotal: Amount


@dataclass(frozen=True)
class CustomerSummaryDTO:
    customer_name: str
    customer_rank: str
    order_count: int
    total_amount: Amount
    items: list[ProductRollupDTO]


@dataclass(frozen=True)
class MonthlySummaryDTO:
    """Output: the monthly report, one row per customer."""

    year: int
    month: int
    summary: list[CustomerSummaryDTO]
    total_orders: int
    grand_total: Amount

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys used by the report's JSON form."""
        return {
            "year": self.year,
            "month": self.month,
            "summary": [
                {
                    "customerName": row.customer_name,
                    "customerRank": row.customer_rank,
                    "orderCount": row.order_count,
                    "totalAmount": row.total_amount,
                    "items": [
                        {
                            "productName": item.product_name,
                            "quantity": item.quantity,
                            "subtotal": item.subtotal,
                        }
                        for item in row.items
                    ],
                }
                for row in self.summary
            ],
            "totalOrders": self.total_orders,
            "grandTotal": self.grand_total,
        }
