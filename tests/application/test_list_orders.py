"""Integration tests for filtered order listing."""

import pytest

from salesbook.application.list_orders import ListOrdersHandler
from salesbook.domain.exceptions import StoreUnavailableError, ValidationError
from salesbook.infrastructure.persistence.document_order_repository import (
    DocumentOrderRepository,
)
from tests.fakes import FakeDocumentStore, order_record


@pytest.fixture
def store():
    store = FakeDocumentStore()
    store.seed("orders", order_record("c1", "2024-03-05", [("Widget", 1, 10)], record_id="o1"))
    store.seed("orders", order_record("c2", "2024-03-20", [("Widget", 1, 10)], record_id="o2", status="completed"))
    store.seed("orders", order_record("c1", "2024-02-28", [("Widget", 1, 10)], record_id="o3", status="completed"))
    store.seed("orders", order_record("c1", "2024-04-01", [("Widget", 1, 10)], record_id="o4"))
    return store


def _list(store, **kwargs):
    return [dto.id for dto in ListOrdersHandler(DocumentOrderRepository(store)).handle(**kwargs)]


class TestListOrders:

    def test_newest_first(self, store):
        assert _list(store) == ["o4", "o2", "o1", "o3"]

    def test_status_filter(self, store):
        assert _list(store, status="completed") == ["o2", "o3"]

    def test_customer_filter(self, store):
        assert _list(store, customer_id="c1") == ["o4", "o1", "o3"]

    def test_date_bounds_are_inclusive(self, store):
        assert _list(store, start_date="2024-03-05", end_date="2024-03-20") == ["o2", "o1"]

    def test_bounds_are_independent(self, store):
        assert _list(store, start_date="2024-03-20") == ["o4", "o2"]
        assert _list(store, end_date="2024-02-28") == ["o3"]

    def test_filters_combine(self, store):
        assert _list(store, status="completed", customer_id="c1", start_date="2024-01-01") == ["o3"]

    def test_capped_at_100(self):
        store = FakeDocumentStore()
        for day in range(1, 29):
            for _ in range(5):
                store.seed("orders", order_record("c1", f"2024-02-{day:02d}", [("W", 1, 1)]))
        orders = ListOrdersHandler(DocumentOrderRepository(store)).handle()
        assert len(orders) == 100
        assert orders[0].order_date == "2024-02-28"

    def test_unknown_status_rejected(self, store):
        with pytest.raises(ValidationError):
            _list(store, status="lost")

    def test_bad_bound_rejected(self, store):
        with pytest.raises(ValidationError, match="Start date"):
            _list(store, start_date="2024/03/01")


class TestStoredOrderQuirks:

    def test_order_without_timestamps_is_listed(self):
        store = FakeDocumentStore()
        record = order_record("c1", "2024-03-05", [("Widget", 1, 10)], record_id="o1")
        del record["createdAt"]
        del record["updatedAt"]
        store.seed("orders", record)

        (dto,) = ListOrdersHandler(DocumentOrderRepository(store)).handle()

        assert dto.created_at == "1970-01-01T00:00:00+00:00"
        assert dto.total_amount == 10

    def test_unknown_stored_status_is_store_unavailable(self):
        store = FakeDocumentStore()
        store.seed("orders", order_record("c1", "2024-03-05", [("Widget", 1, 10)], status="lost"))

        with pytest.raises(StoreUnavailableError, match="Malformed order record"):
            ListOrdersHandler(DocumentOrderRepository(store)).handle()
