"""Record sources: the live Notion database and synthetic sample data."""

from investment_report.connectors.base import BaseRecordSource
from investment_report.connectors.registry import ConnectorRegistry

__all__ = ["BaseRecordSource", "ConnectorRegistry"]
