"""Entity -> DTO mapping shared by the handlers."""

from __future__ import annotations

from salesbook.application.dto import CustomerDTO, OrderDTO, OrderItemDTO, OrderItemSpec
from salesbook.domain.model.customer import Customer
from salesbook.domain.model.order import Order, OrderItem


def items_from_specs(specs: list[OrderItemSpec]) -> list[OrderItem]:
    return [OrderItem.priced(s.product_name, s.quantity, s.unit_price) for s in specs]


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        status=order.status.value,
        status_label=order.status.label,
        items=[
            OrderItemDTO(
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.items
        ],
        total_amount=order.total_amount,
        notes=order.notes,
        order_date=order.order_date,
        delivery_date=order.delivery_date,
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,  # type: ignore[arg-type]
        name=customer.name,
        rank=customer.rank_code,
        rank_label=customer.rank_label,
        phone=customer.phone,
        email=customer.email,
        address=customer.address,
        notes=customer.notes,
        created_at=customer.created_at.isoformat(),
        updated_at=customer.updated_at.isoformat(),
    )
