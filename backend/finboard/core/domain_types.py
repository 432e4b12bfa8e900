"""Domain Types — enums, identifiers and constants shared by core and shell.

Invariants:
    - InvoiceStatus has exactly two members (pending, paid)
    - Amounts are integer minor units (cents) everywhere below the form boundary
    - INVOICES_VIEW_PATH is the single cache/navigation target for invoice mutations

Design Decisions:
    - str Enum for InvoiceStatus: compares equal to raw row values from the store
    - NewType wrappers for invoice ids and cents: zero runtime cost, mypy
      catches a cents value passed where major units are expected
"""

from enum import Enum
from typing import NewType

# ─── Identity Types ─────────────────────────────────────────────
InvoiceId = NewType("InvoiceId", str)

# ─── Value Types ────────────────────────────────────────────────
Cents = NewType("Cents", int)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
INVOICES_VIEW_PATH = "/dashboard/invoices"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class EffectType(str, Enum):
    CACHE_INVALIDATION = "cache_invalidation"
    NAVIGATION_REDIRECT = "navigation_redirect"
