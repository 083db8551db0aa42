"""Integration tests for the customer use cases."""

import pytest

from salesbook.application.create_customer import CreateCustomerHandler
from salesbook.application.delete_customer import DeleteCustomerHandler
from salesbook.application.list_customers import ListCustomersHandler
from salesbook.application.show_customer import ShowCustomerHandler
from salesbook.application.update_customer import UpdateCustomerHandler
from salesbook.domain.exceptions import EntityNotFoundError, ValidationError
from salesbook.infrastructure.persistence.document_customer_repository import (
    DocumentCustomerRepository,
)
from tests.fakes import FakeDocumentStore, FixedClock, customer_record, order_record


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def repo(store, clock):
    return DocumentCustomerRepository(store, clock=clock)


class TestCreateCustomer:

    def test_defaults_rank_d(self, repo):
        dto = CreateCustomerHandler(repo).handle(name="Alice")
        assert dto.rank == "D"
        assert dto.rank_label == "D (new)"
        assert dto.id

    def test_timestamps_set_by_repository(self, repo, clock):
        dto = CreateCustomerHandler(repo).handle(name="Alice", rank="A", phone="555-0100")
        assert dto.created_at == dto.updated_at == clock.now.isoformat()
        assert dto.phone == "555-0100"

    def test_name_required_before_write(self, repo, store):
        with pytest.raises(ValidationError):
            CreateCustomerHandler(repo).handle(name="")
        assert store.calls == []


class TestUpdateCustomer:

    def test_only_given_fields_change(self, repo, store, clock):
        created = CreateCustomerHandler(repo).handle(
            name="Alice", rank="B", email="a@example.com", notes="likes blue"
        )
        clock.advance(minutes=5)

        dto = UpdateCustomerHandler(repo).handle(created.id, rank="A", notes="")

        assert dto.rank == "A"
        assert dto.notes == ""
        assert dto.email == "a@example.com"
        assert dto.name == "Alice"
        assert dto.updated_at == clock.now.isoformat()
        assert dto.created_at == created.created_at

    def test_blank_name_rejected(self, repo):
        created = CreateCustomerHandler(repo).handle(name="Alice")
        with pytest.raises(ValidationError):
            UpdateCustomerHandler(repo).handle(created.id, name=" ")

    def test_rename_does_not_touch_orders(self, repo, store):
        store.seed("customers", customer_record("c1", "Alice", rank="A"))
        store.seed("orders", order_record("c1", "2024-03-05", [("W", 1, 1)], customer_name="Alice", record_id="o1"))

        UpdateCustomerHandler(repo).handle("c1", name="Alicia")

        assert store.raw("orders", "o1")["customerName"] == "Alice"

    def test_missing_customer_returns_none(self, repo):
        assert UpdateCustomerHandler(repo).handle("ghost", name="X") is None


class TestShowAndDeleteCustomer:

    def test_show_missing_is_not_found(self, repo):
        with pytest.raises(EntityNotFoundError):
            ShowCustomerHandler(repo).handle("ghost")

    def test_delete_keeps_orders(self, repo, store):
        store.seed("customers", customer_record("c1", "Alice"))
        store.seed("orders", order_record("c1", "2024-03-05", [("W", 1, 1)], record_id="o1"))

        DeleteCustomerHandler(repo).handle("c1")

        assert store.raw("customers", "c1") is None
        assert store.raw("orders", "o1")["customerId"] == "c1"


class TestListCustomers:

    @pytest.fixture(autouse=True)
    def seeded(self, store):
        for cid, name, rank in [
            ("c1", "Carol Smith", "A"),
            ("c2", "alice", "B"),
            ("c3", "Bob SMITHERS", "A"),
            ("c4", "Dave", "D"),
        ]:
            store.seed("customers", customer_record(cid, name, rank=rank))

    def test_ordered_by_name(self, repo):
        names = [c.name for c in ListCustomersHandler(repo).handle()]
        assert names == ["Bob SMITHERS", "Carol Smith", "Dave", "alice"]

    def test_rank_filter(self, repo):
        assert [c.id for c in ListCustomersHandler(repo).handle(rank="A")] == ["c3", "c1"]

    def test_search_is_case_insensitive_substring(self, repo):
        assert [c.id for c in ListCustomersHandler(repo).handle(search="smith")] == ["c3", "c1"]

    def test_search_and_rank_combine(self, repo):
        assert ListCustomersHandler(repo).handle(rank="B", search="smith") == []

    def test_unknown_rank_rejected(self, repo):
        with pytest.raises(ValidationError):
            ListCustomersHandler(repo).handle(rank="Z")


def test_search_only_sees_first_200_by_name(store):
    """Matches that sort after the 200th name are not found."""
    for i in range(250):
        store.seed("customers", customer_record(f"c{i}", f"Customer {i:03d}"))
    store.seed("customers", customer_record("late", "Zed Smith"))
    repo = DocumentCustomerRepository(store)

    assert ListCustomersHandler(repo).handle(search="smith") == []
    assert len(ListCustomersHandler(repo).handle()) == 200


class TestStoredRecordQuirks:

    def test_unknown_rank_shows_question_mark(self, repo, store):
        record = customer_record("c1", "Alice")
        record["rank"] = ""
        store.seed("customers", record)

        dto = ShowCustomerHandler(repo).handle("c1")

        assert (dto.rank, dto.rank_label) == ("?", "?")

    def test_missing_timestamps_fall_back_to_epoch(self, repo, store):
        record = customer_record("c1", "Alice")
        del record["createdAt"]
        record["updatedAt"] = "not a timestamp"
        store.seed("customers", record)

        dto = ShowCustomerHandler(repo).handle("c1")

        assert dto.created_at == dto.updated_at == "1970-01-01T00:00:00+00:00"

    def test_rank_update_repairs_unknown_rank(self, repo, store):
        record = customer_record("c1", "Alice")
        record["rank"] = "Z"
        store.seed("customers", record)

        assert UpdateCustomerHandler(repo).handle("c1", rank="B").rank == "B"
