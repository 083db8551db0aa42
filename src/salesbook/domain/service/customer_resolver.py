"""Domain service: Batch Customer Resolver.

The store can look up at most ``MAX_BATCH_SIZE`` ids per call, so a set of
customer ids of any size is split into chunks and the per-chunk results are
merged into one id -> Customer mapping.  Chunks are independent: they may be
fetched one after another or in parallel and the merged result is the same.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator

from salesbook.domain.model.customer import Customer
from salesbook.domain.repository.customer_repository import CustomerRepository
from salesbook.domain.repository.document_store import MAX_BATCH_SIZE

logger = logging.getLogger(__name__)

ChunkLookup = Callable[[list[str]], Iterable[Customer]]


def chunked(ids: Iterable[str], size: int) -> Iterator[list[str]]:
    """Yield the distinct *ids*, in first-seen order, in lists of at most *size*."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    distinct = list(dict.fromkeys(ids))
    for start in range(0, len(distinct), size):
        yield distinct[start:start + size]


def resolve_in_batches(
    ids: Iterable[str],
    lookup: ChunkLookup,
    batch_size: int = MAX_BATCH_SIZE,
    max_workers: int = 1,
) -> dict[str, Customer]:
    """Resolve *ids* to customers with one *lookup* call per chunk.

    Ids the lookup does not return are absent from the mapping.  The first
    failing lookup aborts the whole resolution.
    """
    chunks = list(chunked(ids, batch_size))
    if not chunks:
        return {}

    logger.debug(
        "Resolving customers in %d chunk(s) of up to %d ids", len(chunks), batch_size
    )

    if max_workers > 1 and len(chunks) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(chunks))) as pool:
            results = list(pool.map(lambda chunk: list(lookup(chunk)), chunks))
    else:
        results = [list(lookup(chunk)) for chunk in chunks]

    resolved: dict[str, Customer] = {}
    for customers in results:
        for customer in customers:
            if customer.id is not None:
                resolved[customer.id] = customer
    return resolved


class CustomerResolver:
    """Resolves customer ids through a CustomerRepository."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        batch_size: int = MAX_BATCH_SIZE,
        max_workers: int = 1,
    ) -> None:
        if batch_size > MAX_BATCH_SIZE:
            raise ValueError(
                f"Batch size {batch_size} exceeds the store limit of {MAX_BATCH_SIZE}"
            )
        self._customer_repo = customer_repo
        self._batch_size = batch_size
        self._max_workers = max_workers

    def resolve(self, customer_ids: Iterable[str]) -> dict[str, Customer]:
        return resolve_in_batches(
            customer_ids,
            self._customer_repo.get_by_ids,
            batch_size=self._batch_size,
            max_workers=self._max_workers,
        )
