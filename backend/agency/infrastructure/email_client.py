"""Email Client — Resend HTTP API wrapper with template rendering.

Invariants:
    - send() raises EmailDeliveryError on transport failure or non-2xx reply
    - Without an API key the client reports itself unconfigured and sends nothing
    - Templates are rendered with autoescaping: submitted text never becomes markup

Design Decisions:
    - httpx.AsyncClient per send: sends are rare and run in background tasks
    - Jinja2 templates shipped inside the package (agency/templates/email)
"""

import logging
from pathlib import Path
from typing import Any

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from agency.core.errors import EmailDeliveryError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

_template_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def render_template(template_name: str, context: dict[str, Any]) -> str:
    return _template_env.get_template(template_name).render(**context)


class EmailClient:
    """Sends transactional email through the Resend REST API."""

    def __init__(
        self,
        api_key: str | None,
        from_email: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def send(
        self,
        to: str,
        subject: str,
        html: str,
        reply_to: str | None = None,
    ) -> str | None:
        """Send one message; returns the provider message id."""
        if not self.configured:
            raise EmailDeliveryError("email service is not configured")
        payload: dict[str, Any] = {
            "from": self.from_email,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        if reply_to:
            payload["reply_to"] = reply_to
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/emails",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(str(e) or type(e).__name__)
        if response.status_code >= 400:
            raise EmailDeliveryError(
                f"provider returned {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json().get("id")
        except ValueError:
            return None


def build_email_client(settings) -> EmailClient:
    return EmailClient(
        api_key=settings.resend_api_key,
        from_email=settings.from_email,
        base_url=settings.resend_base_url,
        timeout=settings.resend_timeout_seconds,
    )
