import logging

import click

from salesbook.infrastructure.cli.customer_commands import (
    customer_create,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from salesbook.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from salesbook.infrastructure.cli.report_commands import report_monthly


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Salesbook: orders, customers and monthly reports"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def report() -> None:
    """Aggregated reports."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
customer.add_command(customer_create)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
report.add_command(report_monthly)
