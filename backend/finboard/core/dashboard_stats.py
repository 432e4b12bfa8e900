"""Dashboard Stats — pure aggregation of invoice and customer rows for display.

Invariants:
    - All inputs are plain row dicts already fetched from the store (no IO)
    - Sums are taken over integer cents and formatted only at the end
    - Rows with an unexpected status are counted as invoices but never summed
      as pending or paid
    - summarize_customers returns one record per matching customer, unordered
      beyond the store's own order

Design Decisions:
    - Pure functions, not store methods: the same rows feed tests and production
    - Customer search matches name OR email, case-insensitive, trimmed query
"""

from collections.abc import Iterable

from finboard.core.domain_types import InvoiceStatus
from finboard.core.formatting import format_currency
from finboard.core.invoice_search import normalize_query


def sum_by_status(invoices: Iterable[dict], status: InvoiceStatus) -> int:
    """Total cents of invoices with the given status."""
    return sum(inv.get("amount", 0) for inv in invoices if inv.get("status") == status.value)


def compute_card_data(invoices: list[dict], currency: str = "USD") -> dict:
    """Summary cards for the dashboard overview."""
    pending = sum(1 for inv in invoices if inv.get("status") == InvoiceStatus.PENDING.value)
    customers = {inv.get("customer_id") for inv in invoices}
    return {
        "number_of_invoices": len(invoices),
        "total_pending_invoices": pending,
        "number_of_customers": len(customers),
        "total_paid_invoices": format_currency(
            sum_by_status(invoices, InvoiceStatus.PAID), currency,
        ),
    }


def format_invoice_amounts(rows: list[dict], currency: str = "USD") -> list[dict]:
    """Copy rows with "amount" replaced by its display string."""
    return [
        {**row, "amount": format_currency(row.get("amount", 0), currency)}
        for row in rows
    ]


def matches_customer_query(customer: dict, query: str | None) -> bool:
    needle = normalize_query(query)
    if not needle:
        return True
    name = (customer.get("name") or "").lower()
    email = (customer.get("email") or "").lower()
    return needle in name or needle in email


def summarize_customer(customer: dict, currency: str = "USD") -> dict:
    """Customer row plus pending/paid totals and invoice count."""
    invoices = customer.get("invoices") or []
    return {
        "id": customer.get("id"),
        "name": customer.get("name"),
        "email": customer.get("email"),
        "image_url": customer.get("image_url"),
        "total_invoices": len(invoices),
        "total_pending": format_currency(
            sum_by_status(invoices, InvoiceStatus.PENDING), currency,
        ),
        "total_paid": format_currency(
            sum_by_status(invoices, InvoiceStatus.PAID), currency,
        ),
    }


def summarize_customers(
    customers: list[dict], query: str | None, currency: str = "USD",
) -> list[dict]:
    return [
        summarize_customer(c, currency)
        for c in customers
        if matches_customer_query(c, query)
    ]
