"""Resend backed email sender."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ...settings import Settings
from ..application.ports import (
    EmailDeliveryError,
    EmailNotConfiguredError,
    EmailSenderPort,
)

logger = logging.getLogger(__name__)


class ResendEmailSender(EmailSenderPort):
    """Deliver HTML email through the Resend REST API."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._url = settings.resend_api_url
        self._api_key = settings.resend_api_key
        self._sender = settings.email_from

    async def send(self, *, to: str, subject: str, html: str) -> Optional[str]:
        if not self._api_key:
            logger.error("RESEND_API_KEY not configured")
            raise EmailNotConfiguredError("Servicio de email no configurado")

        response = await self._http_client.post(
            self._url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
            json={
                "from": self._sender,
                "to": [to],
                "subject": subject,
                "html": html,
            },
        )

        if not response.is_success:
            logger.error("Resend error: %s %s", response.status_code, response.text)
            raise EmailDeliveryError("Error al enviar el email de bienvenida")

        return response.json().get("id")


def create_resend_sender(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> EmailSenderPort:
    return ResendEmailSender(http_client=http_client, settings=settings)
