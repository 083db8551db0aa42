"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from salesbook.domain.exceptions import ValidationError


class CustomerRank(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def label(self) -> str:
        return _RANK_LABELS[self]

    @staticmethod
    def parse(value: str | CustomerRank) -> CustomerRank:
        if isinstance(value, CustomerRank):
            return value
        try:
            return CustomerRank(value)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown customer rank {value!r}; expected one of A, B, C, D"
            ) from exc


_RANK_LABELS = {
    CustomerRank.A: "A (top)",
    CustomerRank.B: "B (good)",
    CustomerRank.C: "C (regular)",
    CustomerRank.D: "D (new)",
}

DEFAULT_RANK = CustomerRank.D

# Reported for a customer whose stored rank is missing or not recognised.
UNKNOWN_RANK = "?"


@dataclass
class Customer:
    """A customer record.

    Use ``Customer.create()`` for new customers. The ``__init__`` is kept
    simple so repositories can reconstitute stored records as they are.
    ``rank`` is None when the stored rank is missing or not one of A-D.
    """

    id: str | None
    name: str
    rank: CustomerRank | None = DEFAULT_RANK
    phone: str = ""
    email: str = ""
    address: str = ""
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        rank: str | CustomerRank | None = None,
        phone: str = "",
        email: str = "",
        address: str = "",
        notes: str = "",
    ) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(
            id=None,
            name=name.strip(),
            rank=CustomerRank.parse(rank) if rank else DEFAULT_RANK,
            phone=phone or "",
            email=email or "",
            address=address or "",
            notes=notes or "",
        )

    @property
    def rank_code(self) -> str:
        return self.rank.value if self.rank is not None else UNKNOWN_RANK

    @property
    def rank_label(self) -> str:
        return self.rank.label if self.rank is not None else UNKNOWN_RANK
