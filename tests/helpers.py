"""Record builders shared by the test modules."""

from datetime import date, timedelta
from typing import Optional

from investment_report.models.raw import RawRecord

TODAY = date(2026, 3, 5)  # a Thursday


def make_record(
    index: int = 0,
    *,
    due: Optional[date] = None,
    company: Optional[str] = "Acme Robotics",
    action: Optional[str] = "Review board deck",
    amount: Optional[float] = 25000,
    status: Optional[str] = "Active",
    notes: Optional[str] = None,
) -> RawRecord:
    """Notion-shaped page; None leaves the property out."""
    properties: dict = {}
    if company is not None:
        properties["Company Name"] = {"type": "title", "title": [{"plain_text": company}]}
    if due is not None:
        properties["Next Action Date"] = {"type": "date", "date": {"start": due.isoformat(), "end": None}}
    if action is not None:
        properties["Next Action Description"] = {"type": "rich_text", "rich_text": [{"plain_text": action}]}
    if amount is not None:
        properties["Amount Invested"] = {"type": "number", "number": amount}
    if status is not None:
        properties["Current Status"] = {"type": "select", "select": {"name": status}}
    if notes is not None:
        properties["Notes"] = {"type": "rich_text", "rich_text": [{"plain_text": notes}]}
    return RawRecord(
        id=f"page-{index}",
        url=f"https://www.notion.so/page-{index}",
        properties=properties,
    )


def records_due_in(*offsets: int, start: date = TODAY) -> list[RawRecord]:
    """One record per day offset from start, in the given order."""
    return [
        make_record(i, due=start + timedelta(days=offset), company=f"Company {i}")
        for i, offset in enumerate(offsets)
    ]


