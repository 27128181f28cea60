"""Normalized investment and the categorized report built from it."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from investment_report.models.raw import RawRecord

ACTIVE_STATUS = "Active"


class Investment(BaseModel):
    """Immutable view of one tracked investment with a due next action."""

    model_config = ConfigDict(frozen=True)

    id: str
    company_name: str = "Unknown"
    next_action_date: date
    next_action: str = "No action specified"
    amount: float = 0
    status: str = ACTIVE_STATUS
    notes: str = ""
    url: str = ""


class CategorizedReport(BaseModel):
    """
    Investments split into four disjoint due-date buckets.
    Each bucket keeps fetch order (ascending due date). records holds every
    raw record, including those without a due date or outside the window.
    """

    model_config = ConfigDict(frozen=True)

    overdue: list[Investment] = Field(default_factory=list)
    due_today: list[Investment] = Field(default_factory=list)
    this_week: list[Investment] = Field(default_factory=list)
    this_month: list[Investment] = Field(default_factory=list)
    records: list[RawRecord] = Field(default_factory=list)
    active_count: int = Field(default=0, description="Raw records whose status select is Active")

    @property
    def total_count(self) -> int:
        return len(self.records)

    @property
    def action_count(self) -> int:
        """Items needing attention now: overdue plus due today."""
        return len(self.overdue) + len(self.due_today)

    def bucket_counts(self) -> dict[str, int]:
        return {
            "overdue": len(self.overdue),
            "due_today": len(self.due_today),
            "this_week": len(self.this_week),
            "this_month": len(self.this_month),
        }
