"""Record source selection for a report run."""

from datetime import date
from typing import Optional, Type

from investment_report.config import ReportSettings
from investment_report.connectors.base import BaseRecordSource
from investment_report.connectors.notion import NotionConnector
from investment_report.connectors.sample import SampleConnector
from investment_report.models.schema import PropertySchema


class ConnectorRegistry:
    """Maps source ids to record sources and builds the one a run needs."""

    _connectors: dict[str, Type[BaseRecordSource]] = {
        "notion": NotionConnector,
        "sample": SampleConnector,
    }

    @classmethod
    def get(cls, source_id: str, **kwargs) -> BaseRecordSource:
        """Source instance by id; kwargs go to its __init__."""
        connector_cls = cls._connectors.get(source_id.lower())
        if not connector_cls:
            raise ValueError(f"Unknown source: {source_id}. Available: {sorted(cls._connectors)}")
        return connector_cls(**kwargs)

    @classmethod
    def for_run(
        cls,
        settings: ReportSettings,
        *,
        sample: bool,
        today: date,
        schema: PropertySchema,
        seed: Optional[int] = None,
    ) -> BaseRecordSource:
        """
        Synthetic records relative to today when sample is set,
        otherwise the Notion database named in settings.
        """
        if sample:
            return cls.get("sample", today=today, seed=seed, schema=schema)
        return cls.get(
            "notion",
            api_key=settings.notion_api_key,
            database_id=settings.notion_database_id,
            schema=schema,
        )
