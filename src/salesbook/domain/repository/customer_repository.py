"""Abstract repository for Customer entities.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from salesbook.domain.model.customer import Customer, CustomerRank

# Maximum number of name-ordered customers fetched by ``list`` before the
# search term is applied.
CUSTOMER_LIST_LIMIT = 200


@dataclass(frozen=True)
class CustomerFilter:
    rank: CustomerRank | None = None
    search: str | None = None


@dataclass(frozen=True)
class CustomerChanges:
    """Partial update. ``None`` leaves a field unchanged; ``""`` clears it."""

    name: str | None = None
    rank: CustomerRank | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    notes: str | None = None


class CustomerRepository(ABC):

    @abstractmethod
    def list(self, customer_filter: CustomerFilter | None = None) -> list[Customer]:
        """Return customers ordered by name.

        The search term is a case-insensitive substring match on the name and
        is applied after the first ``CUSTOMER_LIST_LIMIT`` records are read,
        so matches beyond that window are not returned.
        """

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_ids(self, customer_ids: list[str]) -> list[Customer]:
        """Return the customers found among at most 30 ids."""

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Persist a new customer and return it with its generated id."""

    @abstractmethod
    def update(self, customer_id: str, changes: CustomerChanges) -> Customer | None:
        """Apply *changes* and return the stored customer, or None if it is gone."""

    @abstractmethod
    def delete(self, customer_id: str) -> None:
        """Remove a customer. Orders referencing it are left as they are."""
