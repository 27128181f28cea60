"""Pytest fixtures for investment-report tests."""

import pytest

from investment_report.config import ReportSettings


@pytest.fixture
def full_settings() -> ReportSettings:
    """Settings with every required variable present."""
    return ReportSettings(
        notion_api_key="secret_abcd1234wxyz",
        notion_database_id="db0123456789",
        resend_api_key="re_abcd1234wxyz",
        email_to="investor@example.com",
    )


@pytest.fixture
def notion_page() -> dict:
    """One page as returned by the Notion database query endpoint."""
    return {
        "object": "page",
        "id": "59833787-2cf9-4fdf-8782-e53db20768a5",
        "url": "https://www.notion.so/TechStart-AI-598337872cf94fdf8782e53db20768a5",
        "properties": {
            "Company Name": {"id": "title", "type": "title", "title": [{"plain_text": "TechStart AI"}]},
            "Next Action Date": {"id": "a", "type": "date", "date": {"start": "2026-03-02", "end": None}},
            "Next Action Description": {
                "id": "b",
                "type": "rich_text",
                "rich_text": [{"plain_text": "Schedule quarterly review call"}],
            },
            "Amount Invested": {"id": "c", "type": "number", "number": 50000},
            "Current Status": {"id": "d", "type": "select", "select": {"name": "Active"}},
            "Notes": {"id": "e", "type": "rich_text", "rich_text": []},
        },
    }
