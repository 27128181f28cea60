"""Mapping raw records to Investments and assembling the categorized report."""

from datetime import date
from typing import Optional

from investment_report.models.investment import ACTIVE_STATUS, CategorizedReport, Investment
from investment_report.models.raw import (
    RawRecord,
    date_start,
    number_value,
    rich_text,
    select_name,
    title_text,
)
from investment_report.models.schema import PropertySchema

from .rules import Bucket, bucket_for, parse_due_date


def to_investment(record: RawRecord, schema: Optional[PropertySchema] = None) -> Optional[Investment]:
    """
    Extract the fixed set of fields into an Investment, applying defaults.
    Returns None when the record has no usable next action date.
    Empty values fall back to defaults the same as missing ones.
    """
    s = schema or PropertySchema()
    due = parse_due_date(date_start(record, s.next_action_date))
    if due is None:
        return None
    return Investment(
        id=record.id,
        company_name=title_text(record, s.company_name) or "Unknown",
        next_action_date=due,
        next_action=rich_text(record, s.next_action) or "No action specified",
        amount=number_value(record, s.amount) or 0,
        status=select_name(record, s.status) or ACTIVE_STATUS,
        notes=rich_text(record, s.notes) or "",
        url=record.url,
    )


def categorize(
    records: list[RawRecord],
    today: date,
    schema: Optional[PropertySchema] = None,
) -> CategorizedReport:
    """
    Split records into due-date buckets relative to today.
    Input order is preserved within each bucket. Pure: reads nothing but its arguments.
    """
    s = schema or PropertySchema()
    buckets: dict[Bucket, list[Investment]] = {b: [] for b in Bucket}

    for record in records:
        investment = to_investment(record, s)
        if investment is None:
            continue
        bucket = bucket_for(investment.next_action_date, today)
        if bucket is not None:
            buckets[bucket].append(investment)

    # Raw status only: a record with no status select is not counted as active
    active = sum(1 for r in records if select_name(r, s.status) == ACTIVE_STATUS)

    return CategorizedReport(
        overdue=buckets[Bucket.OVERDUE],
        due_today=buckets[Bucket.DUE_TODAY],
        this_week=buckets[Bucket.THIS_WEEK],
        this_month=buckets[Bucket.THIS_MONTH],
        records=list(records),
        active_count=active,
    )
