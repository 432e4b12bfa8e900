"""Dashboard Queries — read through the store, then shape rows for display.

Invariants:
    - Every query wraps store failures via storage_operation (fixed message,
      backend error chained as __cause__)
    - fetch_filtered_invoices and fetch_invoices_pages share matches_status_query,
      so a page count always agrees with the pages it counts
    - The invoice search matches status only, never customer name/email
    - fetch_invoice_by_id returns amount in major units (cents / 100)

Design Decisions:
    - Blank search pushes the page window down to the store (offset/limit);
      a non-blank search fetches the ordered rows and filters in memory with the
      shared predicate
    - Aggregation lives in core/dashboard_stats.py; this module only orchestrates IO
"""

import logging

from finboard.core.dashboard_stats import (
    compute_card_data, format_invoice_amounts, summarize_customers,
)
from finboard.core.domain_types import (
    ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT, InvoiceId,
)
from finboard.core.errors import ErrorContext, StorageError
from finboard.core.formatting import from_cents
from finboard.core.invoice_search import (
    count_pages, filter_by_status, normalize_query, page_offset, paginate,
)
from finboard.core.repository_protocols import DashboardStore
from finboard.services.storage_guard import storage_operation

logger = logging.getLogger(__name__)


async def fetch_revenue(store: DashboardStore) -> list[dict]:
    with storage_operation("fetch_revenue", "Failed to fetch revenue data."):
        return await store.list_revenue()


async def fetch_latest_invoices(
    store: DashboardStore,
    limit: int = LATEST_INVOICES_LIMIT,
    currency: str = "USD",
) -> list[dict]:
    """Most recent invoices with customer fields and a formatted amount."""
    with storage_operation(
        "fetch_latest_invoices", "Failed to fetch the latest invoices.",
    ):
        rows = await store.list_invoices_with_customers(limit=limit)
    return format_invoice_amounts(rows, currency)


async def fetch_card_data(store: DashboardStore, currency: str = "USD") -> dict:
    with storage_operation("fetch_card_data", "Failed to fetch card data."):
        invoices = await store.list_invoices()
    return compute_card_data(invoices, currency)


async def fetch_filtered_invoices(
    store: DashboardStore,
    query: str | None,
    page: int,
    per_page: int = ITEMS_PER_PAGE,
) -> list[dict]:
    """One page of invoices (date descending) whose status matches the query."""
    search = normalize_query(query)
    with storage_operation("fetch_filtered_invoices", "Failed to fetch invoices."):
        if not search:
            return await store.list_invoices_with_customers(
                limit=per_page, offset=page_offset(page, per_page),
            )
        rows = await store.list_invoices_with_customers()
    return paginate(filter_by_status(rows, search), page, per_page)


async def fetch_invoices_pages(
    store: DashboardStore, query: str | None, per_page: int = ITEMS_PER_PAGE,
) -> int:
    with storage_operation(
        "fetch_invoices_pages", "Failed to fetch total number of invoices.",
    ):
        invoices = await store.list_invoices()
    return count_pages(len(filter_by_status(invoices, query)), per_page)


async def fetch_invoice_by_id(
    store: DashboardStore, invoice_id: InvoiceId,
) -> dict:
    """Editable fields of one invoice, amount converted back to major units."""
    with storage_operation(
        "fetch_invoice_by_id", "Failed to fetch invoice.", invoice_id,
    ):
        row = await store.get_invoice(invoice_id)
    if row is None:
        logger.error(
            f"Invoice {invoice_id} not found",
            extra={"operation": "fetch_invoice_by_id", "invoice_id": invoice_id},
        )
        raise StorageError(
            "Failed to fetch invoice.", "fetch_invoice_by_id",
            ErrorContext(invoice_id=invoice_id),
        )
    return {
        "id": row["id"],
        "customer_id": row["customer_id"],
        "amount": from_cents(row["amount"]),
        "status": row["status"],
    }


async def fetch_customers(store: DashboardStore) -> list[dict]:
    with storage_operation("fetch_customers", "Failed to fetch all customers."):
        return await store.list_customers()


async def fetch_filtered_customers(
    store: DashboardStore, query: str | None, currency: str = "USD",
) -> list[dict]:
    """Customers matching name/email with pending/paid totals and invoice count."""
    with storage_operation(
        "fetch_filtered_customers", "Failed to fetch customer table.",
    ):
        customers = await store.list_customers_with_invoices()
    return summarize_customers(customers, query, currency)
