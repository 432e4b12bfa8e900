"""ORM Models — SQLAlchemy declarative models for dashboard tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table names match the store contract: invoices, customers, revenue, users

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from finboard.models.customer import Customer  # noqa: F401
from finboard.models.invoice import Invoice  # noqa: F401
from finboard.models.revenue import Revenue  # noqa: F401
from finboard.models.user import User  # noqa: F401
