"""Domain service: group a month's orders into a per-customer summary."""

from __future__ import annotations

from typing import Iterable, Mapping

from salesbook.domain.model.customer import UNKNOWN_RANK, Customer
from salesbook.domain.model.order import Order
from salesbook.domain.model.summary import CustomerSummary, MonthlySummary
from salesbook.domain.model.value_objects import MonthRange


def summarize_orders(
    month: MonthRange,
    orders: Iterable[Order],
    customers: Mapping[str, Customer],
) -> MonthlySummary:
    """Roll *orders* up by customer id.

    Rows come out in the order each customer first appears in *orders*.
    The display name is the snapshot carried by the customer's first order,
    not the current customer record; the rank comes from *customers* and is
    ``"?"`` for ids that did not resolve.
    """
    groups: dict[str, CustomerSummary] = {}
    total_orders = 0

    for order in orders:
        total_orders += 1
        group = groups.get(order.customer_id)
        if group is None:
            customer = customers.get(order.customer_id)
            group = groups[order.customer_id] = CustomerSummary(
                customer_id=order.customer_id,
                customer_name=order.customer_name,
                customer_rank=customer.rank_code if customer else UNKNOWN_RANK,
            )
        group.add(order)

    return MonthlySummary(
        year=month.year,
        month=month.month,
        rows=list(groups.values()),
        total_orders=total_orders,
    )
