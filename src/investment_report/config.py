"""Run settings loaded from the environment (and .env via python-dotenv)."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from investment_report.errors import ConfigurationIncomplete
from investment_report.models.schema import PropertySchema

DEFAULT_FROM_ADDRESS = "Investment Tracker <onboarding@resend.dev>"

# Env var name -> settings field, in the order they are reported when missing
REQUIRED_ENV: dict[str, str] = {
    "NOTION_API_KEY": "notion_api_key",
    "NOTION_DATABASE_ID": "notion_database_id",
    "RESEND_API_KEY": "resend_api_key",
    "REPORT_EMAIL_TO": "email_to",
}


class ReportSettings(BaseModel):
    """Credentials, target database, and recipient for one run."""

    notion_api_key: Optional[str] = None
    notion_database_id: Optional[str] = None
    resend_api_key: Optional[str] = None
    email_to: Optional[str] = None
    email_from: str = DEFAULT_FROM_ADDRESS
    schema_path: Optional[Path] = Field(default=None, description="YAML property-name mapping")

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ReportSettings":
        """Build from os.environ (or the given mapping). Empty strings count as unset."""
        env = os.environ if environ is None else environ
        values: dict = {field: env.get(name) or None for name, field in REQUIRED_ENV.items()}
        if env.get("REPORT_EMAIL_FROM"):
            values["email_from"] = env["REPORT_EMAIL_FROM"]
        if env.get("INVESTMENT_REPORT_SCHEMA"):
            values["schema_path"] = Path(env["INVESTMENT_REPORT_SCHEMA"])
        return cls.model_validate(values)

    def missing(self) -> list[str]:
        """Names of required environment variables with no value."""
        return [name for name, field in REQUIRED_ENV.items() if not getattr(self, field)]

    def require(self) -> None:
        """Raise ConfigurationIncomplete if any required setting is absent."""
        missing = self.missing()
        if missing:
            raise ConfigurationIncomplete(missing)

    def masked(self, name: str) -> str:
        """Value of a required variable with only its first and last 4 chars visible."""
        value = getattr(self, REQUIRED_ENV[name]) or ""
        if len(value) <= 8:
            return "*" * len(value)
        return f"{value[:4]}...{value[-4:]}"

    @property
    def database_url(self) -> str:
        return f"https://notion.so/{self.notion_database_id or ''}"

    def load_schema(self) -> PropertySchema:
        if self.schema_path is None:
            return PropertySchema()
        return PropertySchema.from_yaml(self.schema_path)
