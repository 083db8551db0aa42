"""Application service: List Customers use case (query)."""

from __future__ import annotations

from salesbook.application.dto import CustomerDTO
from salesbook.application.mappers import customer_to_dto
from salesbook.domain.model.customer import CustomerRank
from salesbook.domain.repository.customer_repository import CustomerFilter, CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, rank: str | None = None, search: str | None = None) -> list[CustomerDTO]:
        """Return customers by name.

        *search* only looks through the first 200 customers by name.
        """
        customer_filter = CustomerFilter(
            rank=CustomerRank.parse(rank) if rank else None,
            search=search or None,
        )
        return [customer_to_dto(c) for c in self._customer_repo.list(customer_filter)]
