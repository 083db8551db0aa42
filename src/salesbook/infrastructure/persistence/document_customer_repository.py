"""CustomerRepository backed by any DocumentStore."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from salesbook.domain.model.customer import Customer, CustomerRank
from salesbook.domain.repository.customer_repository import (
    CUSTOMER_LIST_LIMIT,
    CustomerChanges,
    CustomerFilter,
    CustomerRepository,
)
from salesbook.domain.repository.document_store import (
    DocumentStore,
    OrderBy,
    Predicate,
    Record,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

COLLECTION = "customers"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentCustomerRepository(CustomerRepository):

    def __init__(
        self, store: DocumentStore, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self._store = store
        self._clock = clock

    # --- CustomerRepository interface -----------------------------------------

    def list(self, customer_filter: CustomerFilter | None = None) -> list[Customer]:
        customer_filter = customer_filter or CustomerFilter()
        predicates: list[Predicate] = []
        if customer_filter.rank is not None:
            predicates.append(Predicate("rank", "==", customer_filter.rank.value))

        raws = self._store.query(
            COLLECTION, predicates, order_by=OrderBy("name"), limit=CUSTOMER_LIST_LIMIT
        )
        customers = [self._to_domain(raw) for raw in raws]

        # The store cannot do substring matches, so search only narrows the
        # capped page it returned.
        if customer_filter.search:
            needle = customer_filter.search.lower()
            customers = [c for c in customers if needle in c.name.lower()]
        return customers

    def get_by_id(self, customer_id: str) -> Customer | None:
        raw = self._store.get_by_id(COLLECTION, customer_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_ids(self, customer_ids: list[str]) -> list[Customer]:
        raws = self._store.get_by_ids(COLLECTION, customer_ids)
        logger.debug("Batch lookup of %d customer id(s) found %d", len(customer_ids), len(raws))
        return [self._to_domain(raw) for raw in raws]

    def add(self, customer: Customer) -> Customer:
        customer.created_at = customer.updated_at = self._clock()
        raw = self._to_raw(customer)
        raw.pop("id")
        customer.id = self._store.insert(COLLECTION, raw)
        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer

    def update(self, customer_id: str, changes: CustomerChanges) -> Customer | None:
        fields: Record = {"updatedAt": self._clock().isoformat()}
        if changes.name is not None:
            fields["name"] = changes.name
        if changes.rank is not None:
            fields["rank"] = changes.rank.value
        for attr in ("phone", "email", "address", "notes"):
            value = getattr(changes, attr)
            if value is not None:
                fields[attr] = value

        self._store.update_fields(COLLECTION, customer_id, fields)
        logger.info("Updated customer %s (%s)", customer_id, ", ".join(sorted(fields)))
        return self.get_by_id(customer_id)

    def delete(self, customer_id: str) -> None:
        self._store.delete_by_id(COLLECTION, customer_id)
        logger.info("Deleted customer %s", customer_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> Record:
        return {
            "id": customer.id,
            "name": customer.name,
            "rank": customer.rank_code,
            "phone": customer.phone,
            "email": customer.email,
            "address": customer.address,
            "notes": customer.notes,
            "createdAt": customer.created_at.isoformat(),
            "updatedAt": customer.updated_at.isoformat(),
        }

    @staticmethod
    def _rank(value: object) -> CustomerRank | None:
        try:
            return CustomerRank(value)
        except ValueError:
            return None

    @classmethod
    def _to_domain(cls, raw: Record) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw.get("name", ""),
            rank=cls._rank(raw.get("rank")),
            phone=raw.get("phone", ""),
            email=raw.get("email", ""),
            address=raw.get("address", ""),
            notes=raw.get("notes", ""),
            created_at=parse_timestamp(raw.get("createdAt")),
            updated_at=parse_timestamp(raw.get("updatedAt")),
        )
