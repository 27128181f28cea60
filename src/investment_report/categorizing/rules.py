"""Bucket rules: due date vs. a reference day."""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

WEEK_WINDOW = timedelta(days=7)
MONTH_WINDOW = timedelta(days=30)


class Bucket(str, Enum):
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"


def parse_due_date(value: Optional[str]) -> Optional[date]:
    """
    Calendar day of a date property start value.
    Accepts "2026-03-05" and full ISO datetimes; the day is taken as written,
    time of day and UTC offset are dropped. None if missing or unparseable.
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def bucket_for(due: date, today: date) -> Optional[Bucket]:
    """
    First matching window wins:
    overdue (due < today), due today, this week (< today+7),
    this month (< today+30). None for today+30 and later.
    """
    if due < today:
        return Bucket.OVERDUE
    if due == today:
        return Bucket.DUE_TODAY
    if due < today + WEEK_WINDOW:
        return Bucket.THIS_WEEK
    if due < today + MONTH_WINDOW:
        return Bucket.THIS_MONTH
    return None
