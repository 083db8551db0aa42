"""Abstract document store.

The repositories only ever talk to storage through this contract, so any
collection-scoped document database (or an in-memory fake) can back them.
Records are plain dicts; every record returned carries its ``"id"``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

# Largest number of ids a single ``get_by_ids`` call may carry.
MAX_BATCH_SIZE = 30

Record = dict[str, Any]

# Stand-in for a timestamp that is missing or unreadable in a stored record.
UNKNOWN_TIMESTAMP = datetime.fromtimestamp(0, timezone.utc)

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": lambda actual, expected: actual == expected,
    ">=": lambda actual, expected: actual >= expected,
    "<=": lambda actual, expected: actual <= expected,
    "<": lambda actual, expected: actual < expected,
}


@dataclass(frozen=True)
class Predicate:
    """A single ``field <op> value`` condition. Queries AND them together."""

    field: str
    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in _OPERATORS:
            raise ValueError(f"Unsupported operator {self.op!r}")

    def matches(self, record: Record) -> bool:
        if self.field not in record:
            return False
        actual = record[self.field]
        if actual is None:
            return False
        return _OPERATORS[self.op](actual, self.value)


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = False


def apply_query(
    records: Iterable[Record],
    predicates: Iterable[Predicate] = (),
    order_by: OrderBy | None = None,
    limit: int | None = None,
) -> list[Record]:
    """Filter, sort and cap *records* the way ``DocumentStore.query`` does.

    Shared by stores that evaluate queries in process.
    """
    predicates = list(predicates)
    result = [r for r in records if all(p.matches(r) for p in predicates)]
    if order_by is not None:
        result = [r for r in result if r.get(order_by.field) is not None]
        result.sort(key=lambda r: r[order_by.field], reverse=order_by.descending)
    if limit is not None:
        result = result[:limit]
    return result


def parse_timestamp(value: Any) -> datetime:
    """Read an ISO-8601 timestamp field, falling back to ``UNKNOWN_TIMESTAMP``."""
    if not isinstance(value, str) or not value:
        return UNKNOWN_TIMESTAMP
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return UNKNOWN_TIMESTAMP


class DocumentStore(ABC):

    @abstractmethod
    def query(
        self,
        collection: str,
        predicates: Iterable[Predicate] = (),
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """Return matching records, ordered and optionally capped."""

    @abstractmethod
    def get_by_id(self, collection: str, record_id: str) -> Record | None:
        """Return a record by id, or None if it does not exist."""

    @abstractmethod
    def get_by_ids(self, collection: str, ids: list[str]) -> list[Record]:
        """Return the records for at most ``MAX_BATCH_SIZE`` ids.

        Ids with no record are skipped silently.
        """

    @abstractmethod
    def insert(self, collection: str, record: Record) -> str:
        """Store a new record and return its generated id."""

    @abstractmethod
    def update_fields(self, collection: str, record_id: str, fields: Record) -> None:
        """Merge *fields* into an existing record. Other fields are untouched."""

    @abstractmethod
    def delete_by_id(self, collection: str, record_id: str) -> None:
        """Remove a record."""
