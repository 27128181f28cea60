"""Raw record representation as returned by the records store."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawRecord(BaseModel):
    """
    One database page from the records store.
    Properties are kept exactly as the store returns them (typed value bags);
    only the mapping step in categorizing.engine reads them.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    url: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)

    def prop(self, name: str) -> dict[str, Any]:
        """Property value bag by name; empty dict if absent or null."""
        value = self.properties.get(name)
        return value if isinstance(value, dict) else {}


def first_plain_text(runs: Optional[list]) -> Optional[str]:
    """plain_text of the first run in a title/rich_text list."""
    if not runs:
        return None
    first = runs[0]
    if not isinstance(first, dict):
        return None
    return first.get("plain_text")


def title_text(record: RawRecord, name: str) -> Optional[str]:
    return first_plain_text(record.prop(name).get("title"))


def rich_text(record: RawRecord, name: str) -> Optional[str]:
    return first_plain_text(record.prop(name).get("rich_text"))


def number_value(record: RawRecord, name: str) -> Optional[float]:
    return record.prop(name).get("number")


def select_name(record: RawRecord, name: str) -> Optional[str]:
    select = record.prop(name).get("select")
    if not isinstance(select, dict):
        return None
    return select.get("name")


def date_start(record: RawRecord, name: str) -> Optional[str]:
    date_value = record.prop(name).get("date")
    if not isinstance(date_value, dict):
        return None
    return date_value.get("start")
