"""Application service: Show Customer use case (query)."""

from __future__ import annotations

from salesbook.application.dto import CustomerDTO
from salesbook.application.mappers import customer_to_dto
from salesbook.domain.exceptions import EntityNotFoundError
from salesbook.domain.repository.customer_repository import CustomerRepository


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> CustomerDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer {customer_id} not found")
        return customer_to_dto(customer)
