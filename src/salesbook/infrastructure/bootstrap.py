"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Environment:
  SALESBOOK_DATA_DIR        directory holding the JSON collections
  SALESBOOK_LOOKUP_WORKERS  threads used for batch customer lookups
"""

from __future__ import annotations

import os
from pathlib import Path

from salesbook.domain.exceptions import ValidationError
from salesbook.domain.service.customer_resolver import CustomerResolver
from salesbook.infrastructure.persistence.document_customer_repository import (
    DocumentCustomerRepository,
)
from salesbook.infrastructure.persistence.document_order_repository import (
    DocumentOrderRepository,
)
from salesbook.infrastructure.persistence.json_document_store import JsonDocumentStore

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.getenv("SALESBOOK_DATA_DIR", str(_DEFAULT_DATA_DIR)))


def lookup_workers() -> int:
    raw = os.getenv("SALESBOOK_LOOKUP_WORKERS", "1")
    try:
        return max(1, int(raw))
    except ValueError:
        raise ValidationError(
            f"SALESBOOK_LOOKUP_WORKERS must be an integer, got {raw!r}"
        ) from None


def document_store() -> JsonDocumentStore:
    return JsonDocumentStore(data_dir())


def order_repository() -> DocumentOrderRepository:
    return DocumentOrderRepository(document_store())


def customer_repository() -> DocumentCustomerRepository:
    return DocumentCustomerRepository(document_store())


def customer_resolver() -> CustomerResolver:
    return CustomerResolver(customer_repository(), max_workers=lookup_workers())
