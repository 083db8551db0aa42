"""Application service: Create Customer use case."""

from __future__ import annotations

from salesbook.application.dto import CustomerDTO
from salesbook.application.mappers import customer_to_dto
from salesbook.domain.model.customer import Customer
from salesbook.domain.repository.customer_repository import CustomerRepository


class CreateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        rank: str | None = None,
        phone: str = "",
        email: str = "",
        address: str = "",
        notes: str = "",
    ) -> CustomerDTO:
        """Create a customer; the rank defaults to D."""
        customer = Customer.create(
            name=name, rank=rank, phone=phone, email=email, address=address, notes=notes
        )
        self._customer_repo.add(customer)
        return customer_to_dto(customer)
