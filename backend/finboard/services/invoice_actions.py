"""Invoice Actions — validate form input, write through the store, return effects.

Invariants:
    - Validation happens before any store call; ValidationError is not caught here
    - Stored amount == form amount * 100 (integer cents)
    - create stamps today's date; update never touches id or date
    - delete does no existence pre-check
    - Effects on success: create/update -> [CacheInvalidation, NavigationRedirect],
      delete -> [CacheInvalidation]; invalidation is always first
    - authenticate returns a user-facing string for AuthenticationError and lets
      every other exception propagate

Design Decisions:
    - Effects returned as a list instead of calling the web framework: the route
      layer serializes them and tests assert their order
    - Store passed as first argument (dependency injection, no global client)
"""

import logging
from collections.abc import Mapping
from datetime import datetime

from finboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId
from finboard.core.effects import Effect, invalidate_and_redirect, invalidate_only
from finboard.core.errors import AuthenticationError
from finboard.core.formatting import to_cents, today_iso
from finboard.core.repository_protocols import Authenticator, DashboardStore
from finboard.schemas.invoice import parse_invoice_form
from finboard.services.storage_guard import storage_operation

logger = logging.getLogger(__name__)


async def create_invoice(
    store: DashboardStore,
    form: Mapping[str, object],
    now: datetime | None = None,
    view_path: str = INVOICES_VIEW_PATH,
) -> list[Effect]:
    """Validate and insert a new invoice dated today."""
    data = parse_invoice_form(form)
    row = {
        "customer_id": data.customer_id,
        "amount": to_cents(data.amount),
        "status": data.status.value,
        "date": today_iso(now),
    }
    with storage_operation("create_invoice", "Failed to create invoice."):
        await store.insert_invoice(row)
    logger.info(
        "Invoice created", extra={"operation": "create_invoice"},
    )
    return invalidate_and_redirect(view_path)


async def update_invoice(
    store: DashboardStore,
    invoice_id: InvoiceId,
    form: Mapping[str, object],
    view_path: str = INVOICES_VIEW_PATH,
) -> list[Effect]:
    """Validate and apply a partial update (customer, amount, status)."""
    data = parse_invoice_form(form)
    fields = {
        "customer_id": data.customer_id,
        "amount": to_cents(data.amount),
        "status": data.status.value,
    }
    with storage_operation(
        "update_invoice", "Failed to update invoice.", invoice_id,
    ):
        await store.update_invoice(invoice_id, fields)
    logger.info(
        "Invoice updated",
        extra={"operation": "update_invoice", "invoice_id": invoice_id},
    )
    return invalidate_and_redirect(view_path)


async def delete_invoice(
    store: DashboardStore,
    invoice_id: InvoiceId,
    view_path: str = INVOICES_VIEW_PATH,
) -> list[Effect]:
    """Delete by id. No redirect: called from the listing view itself."""
    with storage_operation(
        "delete_invoice", "Failed to delete invoice.", invoice_id,
    ):
        await store.delete_invoice(invoice_id)
    logger.info(
        "Invoice deleted",
        extra={"operation": "delete_invoice", "invoice_id": invoice_id},
    )
    return invalidate_only(view_path)


async def authenticate(
    authenticator: Authenticator, form: Mapping[str, str],
) -> str | None:
    """Credential sign-in. Returns an inline error message, or None on success."""
    try:
        await authenticator.sign_in("credentials", form)
    except AuthenticationError as e:
        logger.warning(
            f"Sign-in rejected: {e.kind}", extra={"error_code": e.code},
        )
        if e.kind == AuthenticationError.CREDENTIALS_SIGNIN:
            return "Invalid credentials."
        return "Something went wrong."
    return None
