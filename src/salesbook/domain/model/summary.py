"""Monthly summary: per-customer accumulators and the report they roll up into."""

from __future__ import annotations

from dataclasses import dataclass, field

from salesbook.domain.model.order import Amount, Order


@dataclass
class ProductRollup:
    """Quantity and subtotal of one product across a customer's orders."""

    product_name: str
    quantity: int = 0
    subtotal: Amount = 0


@dataclass
class CustomerSummary:
    """Accumulates one customer's orders for the month.

    Products are keyed by name, so the same product bought in several
    orders collapses into one rollup. Dict insertion order keeps the rows
    in the order the products were first seen.
    """

    customer_id: str
    customer_name: str
    customer_rank: str
    order_count: int = 0
    total_amount: Amount = 0
    products: dict[str, ProductRollup] = field(default_factory=dict)

    def add(self, order: Order) -> None:
        self.order_count += 1
        self.total_amount += order.total_amount
        for item in order.items:
            rollup = self.products.get(item.product_name)
            if rollup is None:
                rollup = self.products[item.product_name] = ProductRollup(item.product_name)
            rollup.quantity += item.quantity
            rollup.subtotal += item.subtotal

    @property
    def items(self) -> list[ProductRollup]:
        return list(self.products.values())


@dataclass
class MonthlySummary:
    year: int
    month: int
    rows: list[CustomerSummary]
    total_orders: int

    @property
    def grand_total(self) -> Amount:
        return sum(row.total_amount for row in self.rows)
