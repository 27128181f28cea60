"""Resend email transport over its REST API."""

import logging
from typing import Optional, Protocol

import httpx

from investment_report.config import DEFAULT_FROM_ADDRESS
from investment_report.errors import DispatchFailure

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    """Anything that can deliver one HTML message and return a message id."""

    def send(self, to: list[str], subject: str, html: str) -> str: ...


class ResendSender:
    """
    Sends HTML email through https://api.resend.com.
    Error responses ({"name", "message", "statusCode"}) and transport errors
    raise DispatchFailure. No retry.
    """

    BASE_URL = "https://api.resend.com"
    SEND_PATH = "/emails"

    def __init__(
        self,
        api_key: str,
        from_address: str = DEFAULT_FROM_ADDRESS,
        client: Optional[httpx.Client] = None,
    ):
        self.from_address = from_address
        self._client = client or httpx.Client(base_url=self.BASE_URL, timeout=30.0)
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def send(self, to: list[str], subject: str, html: str) -> str:
        """Submit one message; returns the Resend message id."""
        payload = {
            "from": self.from_address,
            "to": to,
            "subject": subject,
            "html": html,
        }
        try:
            resp = self._client.post(self.SEND_PATH, headers=self._headers, json=payload)
        except httpx.RequestError as e:
            raise DispatchFailure(f"Resend request failed: {e}") from e

        if resp.is_error:
            raise DispatchFailure(f"Resend API HTTP {resp.status_code}: {_error_message(resp)}")
        try:
            data = resp.json()
        except ValueError as e:
            raise DispatchFailure(f"Resend returned non-JSON body: {resp.text[:200]}") from e
        message_id = data.get("id") if isinstance(data, dict) else None
        if not message_id:
            raise DispatchFailure(f"Resend response missing message id: {data}")
        return message_id


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict) and body.get("message"):
        return f"{body.get('name', 'error')}: {body['message']}"
    return response.text[:500]
