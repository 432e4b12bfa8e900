"""Dashboard Queries — aggregation, pagination and error wrapping over a fake store.

Invariants:
    - Card fixture {$10 paid, $20 pending, $5 paid; 2 customers} -> 3 / 1 / 2 / "$15.00"
    - fetch_invoices_pages("") on 13 invoices -> 3
    - "PEND" matches "pending" in both the listing and the page count, and the
      two agree on how many rows match
    - fetch_invoice_by_id returns cents / 100
"""

import pytest

from finboard.core.errors import StorageError
from finboard.services.dashboard_queries import (
    fetch_card_data, fetch_customers, fetch_filtered_customers,
    fetch_filtered_invoices, fetch_invoice_by_id, fetch_invoices_pages,
    fetch_latest_invoices, fetch_revenue,
)
from tests.services.fake_store import (
    FakeDashboardStore, make_customer, make_invoice,
)


def _thirteen_invoice_store():
    statuses = ["pending", "paid", "paid"]
    invoices = [
        make_invoice(
            f"i{n:02d}", "c1" if n % 2 else "c2", 100 * n,
            statuses[n % 3], f"2026-01-{n:02d}",
        )
        for n in range(1, 14)
    ]
    return FakeDashboardStore(
        invoices=invoices,
        customers=[
            make_customer("c1", "Alice Smith", "alice@example.com"),
            make_customer("c2", "Bob Jones", "bob@example.com"),
        ],
    )


# --- revenue / latest / cards -------------------------------------------------


async def test_fetch_revenue_passes_rows_through():
    store = FakeDashboardStore(revenue=[{"month": "Jan", "revenue": 2000}])
    assert await fetch_revenue(store) == [{"month": "Jan", "revenue": 2000}]


async def test_fetch_latest_invoices_limits_and_formats():
    store = _thirteen_invoice_store()
    latest = await fetch_latest_invoices(store)

    assert [r["id"] for r in latest] == ["i13", "i12", "i11", "i10", "i09"]
    assert latest[0]["amount"] == "$13.00"
    assert latest[0]["name"] == "Alice Smith"
    assert store.calls == [("list_invoices_with_customers", 5, 0)]


async def test_fetch_card_data_on_fixture(card_fixture_store):
    cards = await fetch_card_data(card_fixture_store)
    assert cards == {
        "number_of_invoices": 3,
        "total_pending_invoices": 1,
        "number_of_customers": 2,
        "total_paid_invoices": "$15.00",
    }


async def test_fetch_card_data_empty_store(fake_store):
    cards = await fetch_card_data(fake_store)
    assert cards["number_of_invoices"] == 0
    assert cards["total_paid_invoices"] == "$0.00"


# --- pagination & search -----------------------------------------------------


async def test_fetch_invoices_pages_blank_query():
    assert await fetch_invoices_pages(_thirteen_invoice_store(), "") == 3


async def test_fetch_invoices_pages_no_invoices(fake_store):
    assert await fetch_invoices_pages(fake_store, "") == 0


async def test_fetch_filtered_invoices_blank_query_pushes_window_to_store():
    store = _thirteen_invoice_store()
    page = await fetch_filtered_invoices(store, "  ", 2)

    assert store.calls == [("list_invoices_with_customers", 6, 6)]
    assert [r["id"] for r in page] == ["i07", "i06", "i05", "i04", "i03", "i02"]


async def test_fetch_filtered_invoices_last_page_is_partial():
    page = await fetch_filtered_invoices(_thirteen_invoice_store(), "", 3)
    assert [r["id"] for r in page] == ["i01"]


async def test_fetch_filtered_invoices_matches_status_only():
    store = _thirteen_invoice_store()
    assert await fetch_filtered_invoices(store, "alice", 1) == []
    assert await fetch_invoices_pages(store, "alice") == 0


async def test_uppercase_query_matches_pending_in_listing_and_page_count():
    store = _thirteen_invoice_store()
    expected = [i for i in store.invoices if i["status"] == "pending"]

    total_pages = await fetch_invoices_pages(store, "PEND")
    listed = []
    for page in range(1, total_pages + 1):
        rows = await fetch_filtered_invoices(store, "PEND", page)
        assert rows, f"page {page} empty but counted"
        listed.extend(rows)

    assert all(r["status"] == "pending" for r in listed)
    assert len(listed) == len(expected)
    assert await fetch_filtered_invoices(store, "PEND", total_pages + 1) == []


@pytest.mark.parametrize("query", ["pa", " PAID ", "i", "ending", "zzz", ""])
async def test_listing_and_page_count_agree(query):
    store = _thirteen_invoice_store()
    total_pages = await fetch_invoices_pages(store, query)

    listed = []
    for page in range(1, total_pages + 2):
        listed.extend(await fetch_filtered_invoices(store, query, page))

    assert total_pages == -(-len(listed) // 6)


async def test_unexpected_status_never_matches_a_search():
    store = FakeDashboardStore(
        invoices=[make_invoice("i1", "c1", 100, "overdue")],
        customers=[make_customer("c1", "A", "a@example.com")],
    )
    assert await fetch_filtered_invoices(store, "pending", 1) == []
    assert len(await fetch_filtered_invoices(store, "", 1)) == 1


# --- edit form ----------------------------------------------------------------


async def test_fetch_invoice_by_id_converts_cents_to_major_units():
    store = FakeDashboardStore(invoices=[make_invoice("i1", "c1", 1250, "paid")])
    invoice = await fetch_invoice_by_id(store, "i1")
    assert invoice == {
        "id": "i1", "customer_id": "c1", "amount": 12.5, "status": "paid",
    }


async def test_fetch_invoice_by_id_missing_raises_storage_error(fake_store):
    with pytest.raises(StorageError) as exc_info:
        await fetch_invoice_by_id(fake_store, "nope")
    assert exc_info.value.message == "Failed to fetch invoice."
    assert exc_info.value.context.invoice_id == "nope"


# --- customers ----------------------------------------------------------------


async def test_fetch_customers_ordered_by_name():
    store = FakeDashboardStore(customers=[
        make_customer("c2", "Zoe", "z@example.com"),
        make_customer("c1", "Amy", "a@example.com"),
    ])
    assert await fetch_customers(store) == [
        {"id": "c1", "name": "Amy"}, {"id": "c2", "name": "Zoe"},
    ]


async def test_fetch_filtered_customers_alice_totals():
    store = FakeDashboardStore(
        invoices=[
            make_invoice("i1", "c1", 500, "paid"),
            make_invoice("i2", "c1", 700, "paid"),
            make_invoice("i3", "c2", 9900, "pending"),
        ],
        customers=[
            make_customer("c1", "Alice Smith", "alice@example.com", "/alice.png"),
            make_customer("c2", "Bob Jones", "bob@example.com"),
        ],
    )
    result = await fetch_filtered_customers(store, "alice")
    assert result == [{
        "id": "c1",
        "name": "Alice Smith",
        "email": "alice@example.com",
        "image_url": "/alice.png",
        "total_invoices": 2,
        "total_pending": "$0.00",
        "total_paid": "$12.00",
    }]


async def test_fetch_filtered_customers_matches_email(card_fixture_store):
    result = await fetch_filtered_customers(card_fixture_store, "BOB@")
    assert [c["name"] for c in result] == ["Bob Jones"]
    assert result[0]["total_pending"] == "$20.00"


# --- error wrapping -----------------------------------------------------------


@pytest.mark.parametrize("call,message", [
    (lambda s: fetch_revenue(s), "Failed to fetch revenue data."),
    (lambda s: fetch_latest_invoices(s), "Failed to fetch the latest invoices."),
    (lambda s: fetch_card_data(s), "Failed to fetch card data."),
    (lambda s: fetch_filtered_invoices(s, "", 1), "Failed to fetch invoices."),
    (lambda s: fetch_filtered_invoices(s, "paid", 1), "Failed to fetch invoices."),
    (lambda s: fetch_invoices_pages(s, ""), "Failed to fetch total number of invoices."),
    (lambda s: fetch_invoice_by_id(s, "i1"), "Failed to fetch invoice."),
    (lambda s: fetch_customers(s), "Failed to fetch all customers."),
    (lambda s: fetch_filtered_customers(s, ""), "Failed to fetch customer table."),
])
async def test_backend_failures_become_storage_errors(fake_store, call, message):
    backend = RuntimeError("relation does not exist")
    fake_store.fail_with = backend

    with pytest.raises(StorageError) as exc_info:
        await call(fake_store)

    err = exc_info.value
    assert err.message == message
    assert err.__cause__ is backend
    assert err.context.debug_info == {"detail": "relation does not exist"}
    assert "relation" not in err.message
