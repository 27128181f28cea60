"""Notion connector: one sorted query against the investments database."""

import logging
from typing import Optional

import httpx

from investment_report.connectors.base import BaseRecordSource
from investment_report.errors import FetchFailure
from investment_report.models.raw import RawRecord
from investment_report.models.schema import PropertySchema

logger = logging.getLogger(__name__)


class NotionConnector(BaseRecordSource):
    """
    Queries a Notion database through the public REST API.
    A single request is made; failures are logged and raised as FetchFailure.
    """

    source_id = "notion"

    BASE_URL = "https://api.notion.com/v1"
    NOTION_VERSION = "2022-06-28"
    QUERY_PATH_TEMPLATE = "/databases/{database_id}/query"

    def __init__(
        self,
        api_key: str,
        database_id: str,
        schema: Optional[PropertySchema] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.database_id = database_id
        self.schema = schema or PropertySchema()
        self._client = client or httpx.Client(base_url=self.BASE_URL, timeout=30.0)
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": self.NOTION_VERSION,
            "Content-Type": "application/json",
        }

    def _query_body(self) -> dict:
        return {
            "sorts": [
                {"property": self.schema.next_action_date, "direction": "ascending"},
            ],
        }

    def fetch_records(self) -> list[RawRecord]:
        path = self.QUERY_PATH_TEMPLATE.format(database_id=self.database_id)
        try:
            resp = self._client.post(path, headers=self._headers, json=self._query_body())
            resp.raise_for_status()
            records = _parse_results(resp.json())
        except httpx.HTTPStatusError as e:
            logger.error(
                "Error fetching from Notion: HTTP %s %s",
                e.response.status_code,
                _error_message(e.response),
            )
            raise FetchFailure(
                f"Notion query failed: HTTP {e.response.status_code} {_error_message(e.response)}"
            ) from e
        except (httpx.RequestError, ValueError) as e:
            logger.error("Error fetching from Notion: %s", e)
            raise FetchFailure(f"Notion query failed: {e}") from e

        logger.debug("Notion returned %d records for database %s", len(records), self.database_id)
        return records


def _parse_results(body) -> list[RawRecord]:
    """Pages from a query response body; ValueError if the body is not a page list."""
    if not isinstance(body, dict):
        raise ValueError(f"unexpected response body: {type(body).__name__}")
    results = body.get("results", [])
    if not isinstance(results, list):
        raise ValueError(f"unexpected results value: {results!r}")
    # pydantic.ValidationError is a ValueError
    return [RawRecord.model_validate(item) for item in results]


def _error_message(response: httpx.Response) -> str:
    """Notion error bodies carry {"code", "message"}; fall back to raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("message"):
        return f"({body.get('code', 'error')}) {body['message']}"
    return response.text[:200]
