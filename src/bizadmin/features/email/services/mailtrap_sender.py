"""Mailtrap send API adapter used by the email proxy."""

import logging
from typing import Any, Optional

import httpx

from ....core.exceptions.infrastructure import EmailDeliveryError
from ..models.requests import SendEmailRequest

logger = logging.getLogger(__name__)


class MailtrapSender:
    """Posts messages to Mailtrap's transactional send endpoint."""

    def __init__(
        self,
        api_url: str,
        api_token: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self._api_token = api_token
        self._timeout = timeout
        self._transport = transport

    async def send(self, request: SendEmailRequest) -> Optional[str]:
        """Send one message and return the provider's message id."""
        headers = {
            "Api-Token": self._api_token,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    json=request.to_provider_payload(),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"Could not reach Mailtrap: {e}")
            raise EmailDeliveryError(f"Failed to send email via Mailtrap: {e}") from e

        result = self._parse(response)
        if not response.is_success:
            logger.error(f"Mailtrap API error {response.status_code}: {result}")
            raise EmailDeliveryError(
                f"Failed to send email via Mailtrap: {self._error_message(result)}",
                details={"status_code": response.status_code},
            )

        message_id = result.get("message_id") if isinstance(result, dict) else None
        if message_id is None and isinstance(result, dict) and result.get("message_ids"):
            message_id = result["message_ids"][0]

        logger.info(f"Email sent to {request.to}, message id {message_id}")
        return message_id

    @staticmethod
    def _parse(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _error_message(result: Any) -> str:
        if isinstance(result, dict):
            if result.get("message"):
                return str(result["message"])
            if result.get("errors"):
                errors = result["errors"]
                return ", ".join(errors) if isinstance(errors, list) else str(errors)
        return "Unknown error"
