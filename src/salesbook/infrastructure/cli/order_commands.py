"""CLI commands for orders."""

from __future__ import annotations

import click

from salesbook.application.create_order import CreateOrderHandler
from salesbook.application.delete_order import DeleteOrderHandler
from salesbook.application.dto import OrderDTO, OrderItemSpec
from salesbook.application.list_orders import ListOrdersHandler
from salesbook.application.show_customer import ShowCustomerHandler
from salesbook.application.show_order import ShowOrderHandler
from salesbook.application.update_order import UpdateOrderHandler
from salesbook.domain.exceptions import DomainException, EntityNotFoundError
from salesbook.domain.model.order import OrderStatus
from salesbook.infrastructure.bootstrap import customer_repository, order_repository

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus])


def _parse_number(raw: str, what: str, name: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{raw}' for product '{name}'.")


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Widget:3:100,Gadget:5:250' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.rsplit(":", 2)
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductName:Quantity:UnitPrice'."
            )
        name, qty_str, price_str = parts
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for product '{name}'.")
        price = _parse_number(price_str, "unit price", name)
        specs.append(OrderItemSpec(product_name=name.strip(), quantity=qty, unit_price=price))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status_label})")
    click.echo(f"Customer: {dto.customer_name} [{dto.customer_id}]")
    click.echo(f"Ordered:  {dto.order_date}")
    click.echo(f"Delivery: {dto.delivery_date or '-'}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>12}")
    click.echo(f"  {'-'*50}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>12}"
        )
    click.echo(f"  {'-'*50}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>23}")


@click.command("list")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Only this status.")
@click.option("--customer-id", default=None, help="Only this customer.")
@click.option("--from", "start_date", default=None, help="Earliest order date (YYYY-MM-DD).")
@click.option("--to", "end_date", default=None, help="Latest order date (YYYY-MM-DD).")
def order_list(
    status: str | None, customer_id: str | None, start_date: str | None, end_date: str | None
) -> None:
    """List up to 100 orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(
            status=status, customer_id=customer_id, start_date=start_date, end_date=end_date
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return
    click.echo(f"  {'Date':<10}  {'ID':<20} {'Customer':<20} {'Status':<12} {'Total':>12}")
    for dto in orders:
        click.echo(
            f"  {dto.order_date:<10}  {dto.id:<20} {dto.customer_name:<20} "
            f"{dto.status_label:<12} {dto.total_amount:>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("create")
@click.option("--customer-id", required=True, help="Customer ID.")
@click.option("--customer-name", default=None, help="Name to record (defaults to the customer's current name).")
@click.option("--items", required=True, help="Items as 'Product:Qty:UnitPrice,...'.")
@click.option("--date", "order_date", required=True, help="Order date (YYYY-MM-DD).")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Initial status (default: received).")
@click.option("--delivery", "delivery_date", default="", help="Delivery date (YYYY-MM-DD).")
@click.option("--notes", default="", help="Free-text notes.")
def order_create(
    customer_id: str,
    customer_name: str | None,
    items: str,
    order_date: str,
    status: str | None,
    delivery_date: str,
    notes: str,
) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    try:
        if customer_name is None:
            customer_name = ShowCustomerHandler(customer_repository()).handle(customer_id).name
        dto = CreateOrderHandler(order_repo=order_repository()).handle(
            customer_id=customer_id,
            customer_name=customer_name,
            item_specs=specs,
            order_date=order_date,
            status=status,
            notes=notes,
            delivery_date=delivery_date,
        )
    except EntityNotFoundError as exc:
        raise click.ClickException(f"{exc}; pass --customer-name to record the order anyway")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--customer-id", default=None)
@click.option("--customer-name", default=None)
@click.option("--items", default=None, help="Replacement items as 'Product:Qty:UnitPrice,...'.")
@click.option("--date", "order_date", default=None, help="Order date (YYYY-MM-DD).")
@click.option("--status", type=STATUS_CHOICE, default=None)
@click.option("--delivery", "delivery_date", default=None, help="Delivery date, '' to clear.")
@click.option("--notes", default=None)
def order_update(
    order_id: str,
    customer_id: str | None,
    customer_name: str | None,
    items: str | None,
    order_date: str | None,
    status: str | None,
    delivery_date: str | None,
    notes: str | None,
) -> None:
    """Change selected fields of an order; omitted fields are kept."""
    specs = _parse_items(items) if items is not None else None
    handler = UpdateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(
            order_id,
            customer_id=customer_id,
            customer_name=customer_name,
            item_specs=specs,
            status=status,
            notes=notes,
            order_date=order_date,
            delivery_date=delivery_date,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} updated")
    if dto is not None:
        _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
