"""CLI commands for customers."""

from __future__ import annotations

import click

from salesbook.application.create_customer import CreateCustomerHandler
from salesbook.application.delete_customer import DeleteCustomerHandler
from salesbook.application.dto import CustomerDTO
from salesbook.application.list_customers import ListCustomersHandler
from salesbook.application.show_customer import ShowCustomerHandler
from salesbook.application.update_customer import UpdateCustomerHandler
from salesbook.domain.exceptions import DomainException
from salesbook.domain.model.customer import CustomerRank
from salesbook.infrastructure.bootstrap import customer_repository

RANK_CHOICE = click.Choice([r.value for r in CustomerRank])


def _display_customer(dto: CustomerDTO) -> None:
    click.echo(f"Customer {dto.id}")
    click.echo(f"Name:    {dto.name}")
    click.echo(f"Rank:    {dto.rank_label}")
    click.echo(f"Phone:   {dto.phone or '-'}")
    click.echo(f"Email:   {dto.email or '-'}")
    click.echo(f"Address: {dto.address or '-'}")
    if dto.notes:
        click.echo(f"Notes:   {dto.notes}")


@click.command("list")
@click.option("--rank", type=RANK_CHOICE, default=None, help="Only this rank.")
@click.option("--search", default=None, help="Case-insensitive name substring.")
def customer_list(rank: str | None, search: str | None) -> None:
    """List customers by name.

    --search only looks through the first 200 customers by name.
    """
    handler = ListCustomersHandler(customer_repo=customer_repository())

    try:
        customers = handler.handle(rank=rank, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return
    click.echo(f"  {'ID':<20} {'Name':<24} {'Rank':<12} {'Phone':<15}")
    for dto in customers:
        click.echo(f"  {dto.id:<20} {dto.name:<24} {dto.rank_label:<12} {dto.phone:<15}")


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID to display.")
def customer_show(customer_id: str) -> None:
    """Show a customer record."""
    handler = ShowCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)


@click.command("create")
@click.option("--name", required=True, help="Customer name.")
@click.option("--rank", type=RANK_CHOICE, default=None, help="Rank (default: D).")
@click.option("--phone", default="")
@click.option("--email", default="")
@click.option("--address", default="")
@click.option("--notes", default="")
def customer_create(
    name: str, rank: str | None, phone: str, email: str, address: str, notes: str
) -> None:
    """Create a customer."""
    handler = CreateCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(
            name=name, rank=rank, phone=phone, email=email, address=address, notes=notes
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} created")
    _display_customer(dto)


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID to update.")
@click.option("--name", default=None)
@click.option("--rank", type=RANK_CHOICE, default=None)
@click.option("--phone", default=None)
@click.option("--email", default=None)
@click.option("--address", default=None)
@click.option("--notes", default=None)
def customer_update(
    customer_id: str,
    name: str | None,
    rank: str | None,
    phone: str | None,
    email: str | None,
    address: str | None,
    notes: str | None,
) -> None:
    """Change selected fields of a customer; omitted fields are kept."""
    handler = UpdateCustomerHandler(customer_repo=customer_repository())

    try:
        dto = handler.handle(
            customer_id,
            name=name,
            rank=rank,
            phone=phone,
            email=email,
            address=address,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} updated")
    if dto is not None:
        _display_customer(dto)


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID to delete.")
def customer_delete(customer_id: str) -> None:
    """Delete a customer (their orders are kept)."""
    handler = DeleteCustomerHandler(customer_repo=customer_repository())

    try:
        handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} deleted.")
