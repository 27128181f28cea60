"""Synthetic records for running the report without a Notion database."""

import random
from datetime import date, timedelta
from typing import Optional

from investment_report.connectors.base import BaseRecordSource
from investment_report.models.raw import RawRecord
from investment_report.models.schema import PropertySchema

COMPANIES = [
    "TechStart AI",
    "FinanceFlow",
    "HealthHub",
    "EduLearn",
    "GreenEnergy Co",
    "DataSync",
    "CloudBase",
    "SecureNet",
    "MarketPlace Pro",
    "AutoDrive",
]

ACTIONS = [
    "Schedule quarterly review call",
    "Review latest board deck",
    "Follow up on hiring plans",
    "Check product roadmap progress",
    "Discuss Series A fundraising",
    "Review financial statements",
    "Connect with new CEO",
    "Evaluate exit opportunities",
    "Update valuation model",
    "Schedule site visit",
]

# Weighted towards Active, like a real portfolio
STATUSES = ["Active", "Active", "Active", "On Hold", "Exited"]


def _day_offset(index: int, rng: random.Random) -> int:
    """Days from today for the index-th sample; spreads records across all buckets."""
    if index < 2:
        return -rng.randint(1, 10)  # overdue
    if index < 3:
        return 0  # due today
    if index < 5:
        return rng.randint(1, 6)  # this week
    return rng.randint(7, 26)  # this month


class SampleConnector(BaseRecordSource):
    """Generates ten records shaped like Notion pages, relative to a given day."""

    source_id = "sample"

    def __init__(
        self,
        today: date,
        seed: Optional[int] = None,
        schema: Optional[PropertySchema] = None,
    ):
        self.today = today
        self.schema = schema or PropertySchema()
        self._rng = random.Random(seed)

    def _make_record(self, index: int) -> RawRecord:
        rng = self._rng
        s = self.schema
        due = self.today + timedelta(days=_day_offset(index, rng))
        company = COMPANIES[index]
        return RawRecord(
            id=f"sample-{index}",
            url=f"https://notion.so/sample-{index}",
            properties={
                s.company_name: {"title": [{"plain_text": company}]},
                s.next_action_date: {"date": {"start": due.isoformat()}},
                s.next_action: {"rich_text": [{"plain_text": ACTIONS[index]}]},
                s.amount: {"number": rng.randint(10_000, 109_999)},
                s.status: {"select": {"name": rng.choice(STATUSES)}},
                s.notes: {"rich_text": [{"plain_text": f"Sample note for {company}"}]},
            },
        )

    def fetch_records(self) -> list[RawRecord]:
        records = [self._make_record(i) for i in range(len(COMPANIES))]
        due_key = self.schema.next_action_date
        # Match the live query's ascending sort
        records.sort(key=lambda r: r.properties[due_key]["date"]["start"])
        return records
