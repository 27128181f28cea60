"""HTML rendering of the categorized report."""

from .formatting import days_overdue, format_currency, format_long_date, format_short_date
from .html import render_report

__all__ = [
    "days_overdue",
    "format_currency",
    "format_long_date",
    "format_short_date",
    "render_report",
]
