"""Invoice ORM — one billed amount owed by a customer.

Invariants:
    - amount is integer cents, never negative (CHECK constraint)
    - status is "pending" or "paid" (enforced at write time by the form schema)
    - date is a calendar date, serialized as YYYY-MM-DD at the store boundary

Design Decisions:
    - String(36) ids instead of a native UUID column: path params arrive as
      plain strings and compare directly on every dialect
    - customer relationship left lazy: listings join customer columns explicitly
      (infrastructure/sql_store.py), so it is never touched in async code
"""

import uuid
import datetime as dt

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finboard.db.base import Base


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)

    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
