from datetime import datetime, timezone

from fintrack.models.transaction import Transaction
from fintrack.stores.categories import CategoryStore
from fintrack.stores.filters import Ordering, Pagination, TransactionFilters
from fintrack.stores.transactions import TransactionStore


def test_empty_filters_add_no_clauses():
    assert TransactionFilters().clauses() == []


def test_each_filter_adds_one_clause():
    filters = TransactionFilters(
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 2, 1, tzinfo=timezone.utc),
        type="debit",
        min_value=-10,
        max_value=0,
        category_id="123e4567-e89b-12d3-a456-426614174000",
    )
    assert len(filters.clauses()) == 6


def test_zero_bounds_are_applied():
    assert len(TransactionFilters(min_value=0, max_value=0).clauses()) == 2


def test_pagination_math():
    p = Pagination(page=3, limit=4)
    assert p.offset == 8
    assert p.total_pages(0) == 0
    assert p.total_pages(8) == 2
    assert p.total_pages(9) == 3


def test_ordering_defaults_to_newest_first():
    cols = Ordering().columns()
    assert len(cols) == 2
    assert "DESC" in str(cols[0]).upper()


def test_store_create_and_get(db):
    store = TransactionStore(db)
    tx = store.create(session_id="s1", title="Salary", amount=2500)

    assert tx.id and len(tx.id) == 36
    assert tx.created_at is not None
    assert store.get("s1", tx.id).title == "Salary"
    assert store.get("s2", tx.id) is None


def test_store_search_is_scoped(db):
    store = TransactionStore(db)
    store.create(session_id="s1", title="a", amount=10)
    store.create(session_id="s1", title="b", amount=-20)
    store.create(session_id="s2", title="c", amount=30)

    page = store.search("s1")
    assert page.total == 2
    assert {t.title for t in page.items} == {"a", "b"}

    debits = store.search("s1", filters=TransactionFilters(type="debit"))
    assert [t.title for t in debits.items] == ["b"]


def test_store_search_ties_are_stable(db):
    store = TransactionStore(db)
    when = datetime(2024, 5, 1, tzinfo=timezone.utc)
    for title in ("x", "y", "z"):
        db.add(Transaction(title=title, amount=1, session_id="s1", created_at=when))
    db.commit()

    ordering = Ordering(sort_by="value", order="asc")
    first = [t.id for t in store.search("s1", ordering=ordering).items]
    second = [t.id for t in store.search("s1", ordering=ordering).items]
    assert first == second == sorted(first)


def test_store_summary(db):
    store = TransactionStore(db)
    assert store.summary("s1") == 0

    store.create(session_id="s1", title="in", amount=1000)
    store.create(session_id="s1", title="out", amount=-250.5)
    store.create(session_id="s2", title="other", amount=99)
    assert store.summary("s1") == 749.5


def test_category_store_delete_is_scoped(db):
    store = CategoryStore(db)
    cat_id = store.create(session_id="s1", name="Food").id

    assert store.delete("s2", cat_id) == 0
    assert store.delete("s1", cat_id) == 1
    assert store.delete("s1", cat_id) == 0
