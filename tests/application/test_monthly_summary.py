"""Integration tests for the monthly summary report."""

import math

import pytest

from salesbook.application.monthly_summary import MonthlySummaryHandler
from salesbook.domain.exceptions import StoreUnavailableError, ValidationError
from salesbook.domain.repository.order_repository import ORDER_LIST_LIMIT
from salesbook.domain.service.customer_resolver import CustomerResolver
from salesbook.infrastructure.persistence.document_customer_repository import (
    DocumentCustomerRepository,
)
from salesbook.infrastructure.persistence.document_order_repository import (
    DocumentOrderRepository,
)
from tests.fakes import FakeDocumentStore, customer_record, order_record


@pytest.fixture
def store():
    return FakeDocumentStore()


def _handler(store, max_workers=1):
    resolver = CustomerResolver(DocumentCustomerRepository(store), max_workers=max_workers)
    return MonthlySummaryHandler(DocumentOrderRepository(store), resolver)


class TestMonthlySummary:

    def test_widget_scenario(self, store):
        store.seed("customers", customer_record("c1", "Alice", rank="A"))
        store.seed("orders", order_record("c1", "2024-03-05", [("Widget", 2, 100)], customer_name="Alice"))
        store.seed("orders", order_record("c1", "2024-03-20", [("Widget", 1, 100)], customer_name="Alice"))

        result = _handler(store).handle(2024, 3).to_dict()

        assert result == {
            "year": 2024,
            "month": 3,
            "summary": [
                {
                    "customerName": "Alice",
                    "customerRank": "A",
                    "orderCount": 2,
                    "totalAmount": 300,
                    "items": [{"productName": "Widget", "quantity": 3, "subtotal": 300}],
                }
            ],
            "totalOrders": 2,
            "grandTotal": 300,
        }

    def test_month_boundaries(self, store):
        store.seed("orders", order_record("c1", "2024-02-28", [("A", 1, 10)]))
        store.seed("orders", order_record("c1", "2024-03-01", [("A", 1, 20)]))

        february = _handler(store).handle(2024, 2)
        march = _handler(store).handle(2024, 3)

        assert (february.total_orders, february.grand_total) == (1, 10)
        assert (march.total_orders, march.grand_total) == (1, 20)

    def test_december_includes_new_years_eve_only(self, store):
        store.seed("orders", order_record("c1", "2024-12-31", [("A", 1, 10)]))
        store.seed("orders", order_record("c1", "2025-01-01", [("A", 1, 20)]))
        assert _handler(store).handle(2024, 12).grand_total == 10
        assert _handler(store).handle(2025, 1).grand_total == 20

    def test_rows_follow_first_order_date(self, store):
        store.seed("orders", order_record("late", "2024-03-25", [("A", 1, 10)]))
        store.seed("orders", order_record("early", "2024-03-02", [("A", 1, 10)]))
        store.seed("orders", order_record("late", "2024-03-01", [("A", 1, 10)]))
        names = [row.customer_name for row in _handler(store).handle(2024, 3).summary]
        assert names == ["Name of late", "Name of early"]

    def test_deleted_customer_rank_is_question_mark(self, store):
        store.seed("orders", order_record("gone", "2024-03-05", [("A", 1, 10)], customer_name="Old Co"))
        row = _handler(store).handle(2024, 3).summary[0]
        assert (row.customer_name, row.customer_rank) == ("Old Co", "?")

    def test_month_is_not_capped(self, store):
        for i in range(ORDER_LIST_LIMIT + 50):
            store.seed("orders", order_record("c1", f"2024-03-{i % 28 + 1:02d}", [("A", 1, 1)]))
        dto = _handler(store).handle(2024, 3)
        assert dto.total_orders == ORDER_LIST_LIMIT + 50
        assert dto.grand_total == ORDER_LIST_LIMIT + 50

    @pytest.mark.parametrize("workers", [1, 3])
    def test_customers_resolved_in_batches_of_30(self, store, workers):
        n = 75
        for i in range(n):
            store.seed("customers", customer_record(f"c{i}", f"Customer {i}", rank="C"))
            store.seed("orders", order_record(f"c{i}", "2024-03-10", [("A", 1, 10)]))
            store.seed("orders", order_record(f"c{i}", "2024-03-11", [("A", 1, 10)]))

        dto = _handler(store, max_workers=workers).handle(2024, 3)

        assert store.count("get_by_ids") == math.ceil(n / 30)
        assert sorted(store.batch_sizes) == [15, 30, 30]
        assert all(row.customer_rank == "C" for row in dto.summary)
        assert len(dto.summary) == n
        assert dto.total_orders == 2 * n

    def test_no_orders_means_no_customer_lookups(self, store):
        dto = _handler(store).handle(2024, 3)
        assert dto.summary == []
        assert store.count("get_by_ids") == 0

    def test_accepts_string_input(self, store):
        dto = _handler(store).handle("2024", "03")
        assert (dto.year, dto.month) == (2024, 3)

    def test_invalid_month_rejected(self, store):
        with pytest.raises(ValidationError):
            _handler(store).handle(2024, 13)
        assert store.calls == []

    def test_store_failure_aborts(self, store):
        store.seed("orders", order_record("c1", "2024-03-05", [("A", 1, 10)]))
        store.fail_on.add("get_by_ids")
        with pytest.raises(StoreUnavailableError):
            _handler(store).handle(2024, 3)


class TestStoredCustomerQuirks:

    @pytest.fixture(autouse=True)
    def march_order(self, store):
        store.seed("orders", order_record("c1", "2024-03-05", [("Widget", 2, 100)], customer_name="Alice"))

    @pytest.mark.parametrize("stored_rank", ["", "Z", None])
    def test_unrecognised_rank_reported_as_question_mark(self, store, stored_rank):
        record = customer_record("c1", "Alice")
        record["rank"] = stored_rank
        store.seed("customers", record)

        row = _handler(store).handle(2024, 3).summary[0]

        assert (row.customer_name, row.customer_rank, row.total_amount) == ("Alice", "?", 200)

    def test_missing_rank_field_reported_as_question_mark(self, store):
        record = customer_record("c1", "Alice")
        del record["rank"]
        store.seed("customers", record)

        assert _handler(store).handle(2024, 3).summary[0].customer_rank == "?"

    def test_customer_without_timestamps_still_resolves(self, store):
        record = customer_record("c1", "Alice", rank="B")
        del record["createdAt"]
        del record["updatedAt"]
        store.seed("customers", record)

        assert _handler(store).handle(2024, 3).summary[0].customer_rank == "B"

    def test_malformed_order_record_is_store_unavailable(self, store):
        broken = order_record("c2", "2024-03-06", [("Widget", 1, 100)])
        del broken["items"][0]["quantity"]
        store.seed("orders", broken)

        with pytest.raises(StoreUnavailableError, match="Malformed order record"):
            _handler(store).handle(2024, 3)
