"""Application service: Update Customer use case (partial merge).

Renaming a customer does not touch the name snapshot stored on their
existing orders.
"""

from __future__ import annotations

from salesbook.application.dto import CustomerDTO
from salesbook.application.mappers import customer_to_dto
from salesbook.domain.exceptions import ValidationError
from salesbook.domain.model.customer import CustomerRank
from salesbook.domain.repository.customer_repository import CustomerChanges, CustomerRepository


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        *,
        name: str | None = None,
        rank: str | None = None,
        phone: str | None = None,
        email: str | None = None,
        address: str | None = None,
        notes: str | None = None,
    ) -> CustomerDTO | None:
        if name is not None and not name.strip():
            raise ValidationError("Customer name cannot be blank")

        changes = CustomerChanges(
            name=name.strip() if name is not None else None,
            rank=CustomerRank.parse(rank) if rank is not None else None,
            phone=phone,
            email=email,
            address=address,
            notes=notes,
        )
        customer = self._customer_repo.update(customer_id, changes)
        return customer_to_dto(customer) if customer is not None else None
