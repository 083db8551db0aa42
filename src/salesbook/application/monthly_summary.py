"""Application service: Monthly Summary report (query).

Pipeline:
1. Turn (year, month) into the half-open date range ``[start, end)``.
2. Read every order in that range, oldest first.  This read is uncapped;
   a truncated month would under-report revenue.
3. Resolve the distinct customer ids in batches.
4. Group by customer and roll up products (domain service).
"""

from __future__ import annotations

import logging

from salesbook.application.dto import CustomerSummaryDTO, MonthlySummaryDTO, ProductRollupDTO
from salesbook.domain.model.summary import MonthlySummary
from salesbook.domain.model.value_objects import MonthRange
from salesbook.domain.repository.order_repository import OrderRepository
from salesbook.domain.service.customer_resolver import CustomerResolver
from salesbook.domain.service.monthly_aggregation import summarize_orders

logger = logging.getLogger(__name__)


class MonthlySummaryHandler:

    def __init__(self, order_repo: OrderRepository, resolver: CustomerResolver) -> None:
        self._order_repo = order_repo
        self._resolver = resolver

    def handle(self, year: int | str, month: int | str) -> MonthlySummaryDTO:
        month_range = MonthRange.of(year, month)
        orders = self._order_repo.list_between(month_range.start, month_range.end)
        customers = self._resolver.resolve(o.customer_id for o in orders)

        summary = summarize_orders(month_range, orders, customers)
        logger.info(
            "Monthly summary %s: %d order(s), %d customer(s), grand total %s",
            month_range,
            summary.total_orders,
            len(summary.rows),
            summary.grand_total,
        )
        return self._to_dto(summary)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(summary: MonthlySummary) -> MonthlySummaryDTO:
        return MonthlySummaryDTO(
            year=summary.year,
            month=summary.month,
            summary=[
                CustomerSummaryDTO(
                    customer_name=row.customer_name,
                    customer_rank=row.customer_rank,
                    order_count=row.order_count,
                    total_amount=row.total_amount,
                    items=[
                        ProductRollupDTO(
                            product_name=item.product_name,
                            quantity=item.quantity,
                            subtotal=item.subtotal,
                        )
                        for item in row.items
                    ],
                )
                for row in summary.rows
            ],
            total_orders=summary.total_orders,
            grand_total=summary.grand_total,
        )
