"""Application service: Delete Customer use case.

Orders keep their customer id and name snapshot; nothing cascades.
"""

from __future__ import annotations

from salesbook.domain.repository.customer_repository import CustomerRepository


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> None:
        self._customer_repo.delete(customer_id)
