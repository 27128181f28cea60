"""Property-name mapping between the Notion database and Investment fields."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class PropertySchema(BaseModel):
    """Names of the database properties read by the mapping step."""

    company_name: str = Field(default="Company Name", description="title property")
    next_action_date: str = Field(default="Next Action Date", description="date property; also the sort key")
    next_action: str = Field(default="Next Action Description", description="rich_text property")
    amount: str = Field(default="Amount Invested", description="number property")
    status: str = Field(default="Current Status", description="select property")
    notes: str = Field(default="Notes", description="rich_text property")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PropertySchema":
        """Load from YAML. Supports nested (properties:) or flat structure; unset keys keep defaults."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping of property names, got {type(data).__name__}")
        nested = data.get("properties") or {}
        if not isinstance(nested, dict):
            raise ValueError(f"{path}: 'properties' must be a mapping, got {type(nested).__name__}")
        fields = {}
        for key in cls.model_fields:
            value = nested.get(key, data.get(key))
            if value:
                fields[key] = str(value)
        return cls.model_validate(fields)
