"""Display formatting for amounts and dates (en-US conventions)."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float | int | Decimal) -> str:
    """US dollars rounded to whole units: 50000 -> "$50,000", -1200.4 -> "-$1,200"."""
    whole = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,}"


def format_short_date(d: date) -> str:
    """"Mar 5" (no zero padding)."""
    return f"{d:%b} {d.day}"


def format_long_date(d: date) -> str:
    """"Thursday, March 5, 2026"."""
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def days_overdue(due: date, today: date) -> int:
    """Whole days between due and today."""
    return (today - due).days
