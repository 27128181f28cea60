"""Abstract base class for record sources."""

from abc import ABC, abstractmethod

from investment_report.models.raw import RawRecord


class BaseRecordSource(ABC):
    """
    Standard interface for investment record sources.
    Implementations return every record in ascending next-action-date order.
    """

    source_id: str = ""

    @abstractmethod
    def fetch_records(self) -> list[RawRecord]:
        """Run one query and return the raw records, sorted by due date ascending."""
        pass
