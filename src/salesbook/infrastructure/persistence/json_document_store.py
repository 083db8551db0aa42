"""JSON-file-backed implementation of DocumentStore.

Each collection lives in its own file, ``<data_dir>/<collection>.json``,
holding a list of records.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Iterable

from salesbook.domain.exceptions import StoreUnavailableError
from salesbook.domain.repository.document_store import (
    MAX_BATCH_SIZE,
    DocumentStore,
    OrderBy,
    Predicate,
    Record,
    apply_query,
)

logger = logging.getLogger(__name__)


class JsonDocumentStore(DocumentStore):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    # --- DocumentStore interface ----------------------------------------------

    def query(
        self,
        collection: str,
        predicates: Iterable[Predicate] = (),
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        records = apply_query(self._load_raw(collection), predicates, order_by, limit)
        logger.debug("query %s -> %d record(s)", collection, len(records))
        return records

    def get_by_id(self, collection: str, record_id: str) -> Record | None:
        for raw in self._load_raw(collection):
            if raw["id"] == record_id:
                return raw
        return None

    def get_by_ids(self, collection: str, ids: list[str]) -> list[Record]:
        if len(ids) > MAX_BATCH_SIZE:
            raise ValueError(
                f"At most {MAX_BATCH_SIZE} ids per batch lookup, got {len(ids)}"
            )
        wanted = set(ids)
        return [raw for raw in self._load_raw(collection) if raw["id"] in wanted]

    def insert(self, collection: str, record: Record) -> str:
        records = self._load_raw(collection)
        record_id = uuid.uuid4().hex[:20]
        records.append({"id": record_id, **record})
        self._persist_raw(collection, records)
        logger.debug("inserted %s/%s", collection, record_id)
        return record_id

    def update_fields(self, collection: str, record_id: str, fields: Record) -> None:
        records = self._load_raw(collection)
        for raw in records:
            if raw["id"] == record_id:
                raw.update(fields)
                self._persist_raw(collection, records)
                return
        logger.debug("update of missing record %s/%s ignored", collection, record_id)

    def delete_by_id(self, collection: str, record_id: str) -> None:
        records = self._load_raw(collection)
        remaining = [raw for raw in records if raw["id"] != record_id]
        if len(remaining) != len(records):
            self._persist_raw(collection, remaining)

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _load_raw(self, collection: str) -> list[Record]:
        path = self._path(collection)
        try:
            if not path.exists():
                return []
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(f"Cannot read collection '{collection}': {exc}") from exc
        if not isinstance(records, list):
            raise StoreUnavailableError(f"Collection '{collection}' is not a list of records")
        return records

    def _persist_raw(self, collection: str, records: list[Record]) -> None:
        path = self._path(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write collection '{collection}': {exc}") from exc
