"""Money & Date Formatting — pure conversions between storage and display forms.

Invariants:
    - Storage amounts are integer cents; display amounts are cents / 100
    - format_currency never raises for integer input (negatives get a leading "-")
    - today_iso() returns YYYY-MM-DD in UTC

Design Decisions:
    - Decimal arithmetic for cents <-> major units: no float rounding on write
    - Symbol table instead of a locale database: the dashboard shows one
      configured currency, and unknown codes degrade to "EUR 1,234.00" style
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from finboard.core.domain_types import Cents

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_currency(amount_cents: Cents, currency: str = "USD") -> str:
    """Format integer cents as a display string, e.g. 123456 -> "$1,234.56"."""
    value = Decimal(int(amount_cents)) / 100
    sign = "-" if value < 0 else ""
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    return f"{sign}{symbol}{abs(value):,.2f}"


def to_cents(amount: Decimal | int | float) -> Cents:
    """Major units -> integer cents (half-up on a third decimal)."""
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Cents(int(cents))


def from_cents(amount_cents: Cents) -> float:
    """Integer cents -> major units for form pre-population."""
    return amount_cents / 100


def today_iso(now: datetime | None = None) -> str:
    """Current date as YYYY-MM-DD. Pass `now` to pin the clock."""
    moment = now or datetime.now(timezone.utc)
    return moment.date().isoformat()
