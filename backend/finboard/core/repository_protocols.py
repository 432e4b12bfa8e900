"""Boundary Protocols — contracts between core/services and the store shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The store handle is always passed in explicitly (no process-wide client)
    - Rows cross the boundary as plain dicts; amounts are integer cents and
      dates are ISO "YYYY-MM-DD" strings
    - Store methods raise whatever the backend raises; services wrap it

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass a plain fake
    - Async in Protocol: implementations do IO, the pure functions that consume
      their rows are never async
"""

from typing import Protocol, Mapping

from finboard.core.domain_types import InvoiceId


class DashboardStore(Protocol):
    """Capability surface over the invoices, customers and revenue tables."""

    async def list_revenue(self) -> list[dict]: ...

    async def list_invoices(self) -> list[dict]:
        """All invoices: id, customer_id, amount, status, date."""
        ...

    async def list_invoices_with_customers(
        self, limit: int | None = None, offset: int = 0,
    ) -> list[dict]:
        """Invoices ordered by date descending, each with name/email/image_url
        of its customer. limit=None returns every row from offset on."""
        ...

    async def get_invoice(self, invoice_id: InvoiceId) -> dict | None: ...

    async def list_customers(self) -> list[dict]:
        """id/name of every customer, ordered by name ascending."""
        ...

    async def list_customers_with_invoices(self) -> list[dict]:
        """Every customer with an "invoices" list of id/amount/status."""
        ...

    async def insert_invoice(self, row: Mapping[str, object]) -> None: ...

    async def update_invoice(
        self, invoice_id: InvoiceId, fields: Mapping[str, object],
    ) -> None: ...

    async def delete_invoice(self, invoice_id: InvoiceId) -> None: ...


class Authenticator(Protocol):
    """Credential sign-in — implemented by shell.

    Raises AuthenticationError on rejected credentials; anything else it
    raises is a bug and must reach the caller untouched.
    """
    async def sign_in(self, provider: str, form: Mapping[str, str]) -> None: ...
