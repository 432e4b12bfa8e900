"""Invoice Search & Pagination — the one status predicate and page arithmetic.

Invariants:
    - matches_status_query is the ONLY definition of "an invoice matches a search";
      both the page listing and the page count go through it
    - The search looks at the status field only (not customer name/email)
    - A blank or whitespace-only query matches every row, including rows whose
      status is missing or unexpected
    - page_offset(page) == (page - 1) * per_page, pages below 1 clamp to 1
    - count_pages(n) == ceil(n / per_page)

Design Decisions:
    - Case-insensitive substring match after trimming the query: "PEND" and
      " pend " both match "pending"
    - Unknown statuses are not an error at read time, they just never match a
      non-blank query
"""

import math
from collections.abc import Iterable

from finboard.core.domain_types import ITEMS_PER_PAGE


def normalize_query(query: str | None) -> str:
    """Trim and lower-case a search string. None counts as blank."""
    return (query or "").strip().lower()


def matches_status_query(status: str | None, query: str | None) -> bool:
    """True if `status` contains the trimmed query, ignoring case."""
    needle = normalize_query(query)
    if not needle:
        return True
    return needle in (status or "").lower()


def filter_by_status(rows: Iterable[dict], query: str | None) -> list[dict]:
    """Keep rows whose "status" matches the query, preserving order."""
    return [r for r in rows if matches_status_query(r.get("status"), query)]


def page_offset(page: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Zero-based offset of the first row on a 1-based page."""
    return (max(page, 1) - 1) * per_page


def paginate(rows: list[dict], page: int, per_page: int = ITEMS_PER_PAGE) -> list[dict]:
    """Slice one page out of an already ordered and filtered row list."""
    start = page_offset(page, per_page)
    return rows[start:start + per_page]


def count_pages(total: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed to show `total` rows."""
    return math.ceil(total / per_page)
