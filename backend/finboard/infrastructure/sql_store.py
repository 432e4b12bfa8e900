"""SQL Dashboard Store — DashboardStore implementation over an AsyncSession.

Invariants:
    - Returns plain dicts (amount in cents, date as YYYY-MM-DD), never ORM objects
    - Invoice listings order by date descending, id descending as tie-breaker,
      so page windows are stable across requests
    - Each write commits on its own; a failed write rolls back before re-raising
    - Backend exceptions propagate as-is: services decide the user-facing error

Design Decisions:
    - Column-level join for invoice listings instead of ORM relationship loads:
      one round trip, flat rows ready for the table view
    - Core UPDATE/DELETE statements: no read-before-write, and a delete of a
      missing id is a successful no-op
"""

import datetime as dt
from collections.abc import Mapping

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.core.domain_types import InvoiceId
from finboard.models.customer import Customer
from finboard.models.invoice import Invoice
from finboard.models.revenue import Revenue


def _invoice_to_dict(invoice: Invoice) -> dict:
    return {
        "id": invoice.id,
        "customer_id": invoice.customer_id,
        "amount": invoice.amount,
        "status": invoice.status,
        "date": invoice.date.isoformat(),
    }


def _as_date(value: object) -> dt.date:
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value))


class SqlDashboardStore:
    """Reads and writes the dashboard tables through one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_revenue(self) -> list[dict]:
        result = await self._db.execute(select(Revenue))
        return [
            {"month": r.month, "revenue": r.revenue}
            for r in result.scalars().all()
        ]

    async def list_invoices(self) -> list[dict]:
        result = await self._db.execute(select(Invoice))
        return [_invoice_to_dict(inv) for inv in result.scalars().all()]

    async def list_invoices_with_customers(
        self, limit: int | None = None, offset: int = 0,
    ) -> list[dict]:
        query = (
            select(
                Invoice.id, Invoice.customer_id, Invoice.amount,
                Invoice.status, Invoice.date,
                Customer.name, Customer.email, Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id.desc())
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self._db.execute(query)
        return [
            {
                "id": row.id,
                "customer_id": row.customer_id,
                "amount": row.amount,
                "status": row.status,
                "date": row.date.isoformat(),
                "name": row.name,
                "email": row.email,
                "image_url": row.image_url,
            }
            for row in result.all()
        ]

    async def get_invoice(self, invoice_id: InvoiceId) -> dict | None:
        result = await self._db.execute(
            select(Invoice).where(Invoice.id == invoice_id),
        )
        invoice = result.scalar_one_or_none()
        return _invoice_to_dict(invoice) if invoice else None

    async def list_customers(self) -> list[dict]:
        result = await self._db.execute(
            select(Customer.id, Customer.name).order_by(Customer.name.asc()),
        )
        return [{"id": row.id, "name": row.name} for row in result.all()]

    async def list_customers_with_invoices(self) -> list[dict]:
        result = await self._db.execute(select(Customer))
        return [
            {
                "id": c.id,
                "name": c.name,
                "email": c.email,
                "image_url": c.image_url,
                "invoices": [
                    {"id": inv.id, "amount": inv.amount, "status": inv.status}
                    for inv in c.invoices
                ],
            }
            for c in result.scalars().all()
        ]

    async def insert_invoice(self, row: Mapping[str, object]) -> None:
        self._db.add(Invoice(
            customer_id=row["customer_id"],
            amount=row["amount"],
            status=row["status"],
            date=_as_date(row["date"]),
        ))
        await self._commit()

    async def update_invoice(
        self, invoice_id: InvoiceId, fields: Mapping[str, object],
    ) -> None:
        await self._db.execute(
            update(Invoice).where(Invoice.id == invoice_id).values(**fields),
        )
        await self._commit()

    async def delete_invoice(self, invoice_id: InvoiceId) -> None:
        await self._db.execute(delete(Invoice).where(Invoice.id == invoice_id))
        await self._commit()

    async def _commit(self) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            raise
