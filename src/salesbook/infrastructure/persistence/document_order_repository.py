"""OrderRepository backed by any DocumentStore."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from salesbook.domain.exceptions import StoreUnavailableError
from salesbook.domain.model.order import Order, OrderItem, OrderStatus, total_of
from salesbook.domain.repository.document_store import (
    DocumentStore,
    OrderBy,
    Predicate,
    Record,
    parse_timestamp,
)
from salesbook.domain.repository.order_repository import (
    ORDER_LIST_LIMIT,
    OrderChanges,
    OrderFilter,
    OrderRepository,
)

logger = logging.getLogger(__name__)

COLLECTION = "orders"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentOrderRepository(OrderRepository):

    def __init__(self, store: DocumentStore, clock: Clock = _utcnow) -> None:
        self._store = store
        self._clock = clock

    # --- OrderRepository interface --------------------------------------------

    def list(self, order_filter: OrderFilter | None = None) -> list[Order]:
        order_filter = order_filter or OrderFilter()
        predicates: list[Predicate] = []
        if order_filter.status is not None:
            predicates.append(Predicate("status", "==", order_filter.status.value))
        if order_filter.customer_id:
            predicates.append(Predicate("customerId", "==", order_filter.customer_id))
        if order_filter.start_date:
            predicates.append(Predicate("orderDate", ">=", order_filter.start_date))
        if order_filter.end_date:
            predicates.append(Predicate("orderDate", "<=", order_filter.end_date))

        raws = self._store.query(
            COLLECTION,
            predicates,
            order_by=OrderBy("orderDate", descending=True),
            limit=ORDER_LIST_LIMIT,
        )
        return [self._to_domain(raw) for raw in raws]

    def list_between(self, start: str, end: str) -> list[Order]:
        raws = self._store.query(
            COLLECTION,
            [Predicate("orderDate", ">=", start), Predicate("orderDate", "<", end)],
            order_by=OrderBy("orderDate"),
        )
        return [self._to_domain(raw) for raw in raws]

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get_by_id(COLLECTION, order_id)
        return self._to_domain(raw) if raw is not None else None

    def add(self, order: Order) -> Order:
        order.created_at = order.updated_at = self._clock()
        raw = self._to_raw(order)
        raw.pop("id")
        order.id = self._store.insert(COLLECTION, raw)
        logger.info("Created order %s for customer %s", order.id, order.customer_id)
        return order

    def update(self, order_id: str, changes: OrderChanges) -> Order | None:
        fields: Record = {"updatedAt": self._clock().isoformat()}

        if changes.items is not None:
            fields["items"] = [self._item_to_raw(item) for item in changes.items]
            fields["totalAmount"] = total_of(changes.items)
        if changes.status is not None:
            fields["status"] = changes.status.value
        if changes.notes is not None:
            fields["notes"] = changes.notes
        if changes.customer_id is not None:
            fields["customerId"] = changes.customer_id
        if changes.customer_name is not None:
            fields["customerName"] = changes.customer_name
        if changes.order_date is not None:
            fields["orderDate"] = changes.order_date
        if changes.delivery_date is not None:
            fields["deliveryDate"] = changes.delivery_date

        self._store.update_fields(COLLECTION, order_id, fields)
        logger.info("Updated order %s (%s)", order_id, ", ".join(sorted(fields)))
        return self.get_by_id(order_id)

    def delete(self, order_id: str) -> None:
        self._store.delete_by_id(COLLECTION, order_id)
        logger.info("Deleted order %s", order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _item_to_raw(item: OrderItem) -> Record:
        return {
            "productName": item.product_name,
            "quantity": item.quantity,
            "unitPrice": item.unit_price,
            "subtotal": item.quantity * item.unit_price,
        }

    @classmethod
    def _to_raw(cls, order: Order) -> Record:
        items = [cls._item_to_raw(item) for item in order.items]
        return {
            "id": order.id,
            "customerId": order.customer_id,
            "customerName": order.customer_name,
            "items": items,
            "totalAmount": sum(i["subtotal"] for i in items),
            "status": order.status.value,
            "notes": order.notes,
            "orderDate": order.order_date,
            "deliveryDate": order.delivery_date,
            "createdAt": order.created_at.isoformat(),
            "updatedAt": order.updated_at.isoformat(),
        }

    @classmethod
    def _to_domain(cls, raw: Record) -> Order:
        try:
            return cls._record_to_order(raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise StoreUnavailableError(
                f"Malformed order record {raw.get('id')!r}: {exc!r}"
            ) from exc

    @staticmethod
    def _record_to_order(raw: Record) -> Order:
        items = [
            OrderItem(
                product_name=i["productName"],
                quantity=i["quantity"],
                unit_price=i["unitPrice"],
                subtotal=i.get("subtotal", i["quantity"] * i["unitPrice"]),
            )
            for i in raw.get("items", [])
        ]
        return Order(
            id=raw["id"],
            customer_id=raw.get("customerId", ""),
            customer_name=raw.get("customerName", ""),
            items=items,
            order_date=raw.get("orderDate", ""),
            total_amount=raw.get("totalAmount", total_of(items)),
            status=OrderStatus(raw.get("status", OrderStatus.RECEIVED.value)),
            notes=raw.get("notes", ""),
            delivery_date=raw.get("deliveryDate", ""),
            created_at=parse_timestamp(raw.get("createdAt")),
            updated_at=parse_timestamp(raw.get("updatedAt")),
        )
