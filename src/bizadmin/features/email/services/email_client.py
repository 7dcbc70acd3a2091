"""Client for the email proxy."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ....config.settings import AppSettings
from ....core.exceptions.infrastructure import EmailDeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailResult:
    success: bool
    message_id: Optional[str] = None


class EmailClient:
    """Sends messages through ``POST /send-email`` on the email proxy."""

    def __init__(
        self,
        proxy_url: str,
        sender_email: str,
        sender_name: Optional[str] = None,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.proxy_url = proxy_url
        self.sender_email = sender_email
        self.sender_name = sender_name
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EmailClient":
        return cls(
            settings.email_proxy_url,
            settings.email_from_address,
            settings.email_from_name,
            transport=transport,
        )

    async def send(
        self,
        to: str,
        subject: str,
        html: Optional[str] = None,
        text: Optional[str] = None,
    ) -> EmailResult:
        body = {
            "to": to,
            "from": {"email": self.sender_email, "name": self.sender_name},
            "subject": subject,
            "html": html,
            "text": text,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self.proxy_url, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Email proxy unreachable: {e}")
            raise EmailDeliveryError(f"Email proxy unreachable: {e}") from e

        try:
            result = response.json()
        except ValueError:
            result = {}

        if not response.is_success or not result.get("success"):
            message = result.get("error") or result.get("detail") or f"HTTP {response.status_code}"
            logger.error(f"Email to {to} rejected: {message}")
            raise EmailDeliveryError(
                f"Failed to send email: {message}",
                details={"status_code": response.status_code},
            )

        return EmailResult(success=True, message_id=result.get("messageId"))
