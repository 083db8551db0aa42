"""CLI commands for reports."""

from __future__ import annotations

import json

import click

from salesbook.application.dto import MonthlySummaryDTO
from salesbook.application.monthly_summary import MonthlySummaryHandler
from salesbook.domain.exceptions import DomainException
from salesbook.infrastructure.bootstrap import customer_resolver, order_repository


def _display_summary(dto: MonthlySummaryDTO) -> None:
    click.echo(f"Monthly summary {dto.year:04d}-{dto.month:02d}")
    click.echo()
    if not dto.summary:
        click.echo("  No orders this month.")
    for row in dto.summary:
        click.echo(
            f"  {row.customer_name} (rank {row.customer_rank})  "
            f"orders={row.order_count}  total={row.total_amount}"
        )
        for item in row.items:
            click.echo(f"      {item.product_name:<24} {item.quantity:>6} {item.subtotal:>12}")
    click.echo()
    click.echo(f"  Orders: {dto.total_orders}")
    click.echo(f"  Grand total: {dto.grand_total}")


@click.command("monthly")
@click.option("--year", required=True, type=int, help="Calendar year, e.g. 2024.")
@click.option("--month", required=True, type=click.IntRange(1, 12), help="Month 1-12.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
def report_monthly(year: int, month: int, as_json: bool) -> None:
    """Summarize a month's orders per customer and product."""
    try:
        handler = MonthlySummaryHandler(
            order_repo=order_repository(), resolver=customer_resolver()
        )
        dto = handler.handle(year, month)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict(), ensure_ascii=False, indent=2))
    else:
        _display_summary(dto)
