"""OpenAI compatible chat completion client."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ...settings import Settings
from ..application.ports import (
    AIGatewayError,
    ChatCompletionPort,
    SummaryUnavailableError,
)

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: Dict[int, str] = {
    429: "Demasiadas solicitudes, intenta de nuevo en unos segundos.",
    402: "Créditos insuficientes.",
}


class AIGatewayClient(ChatCompletionPort):
    """Send chat completions to the configured AI gateway."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._url = settings.ai_gateway_url
        self._api_key = settings.ai_gateway_api_key
        self._model = settings.ai_model

    async def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        if not self._api_key:
            raise SummaryUnavailableError("Servicio no disponible.")

        response = await self._http_client.post(
            self._url,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json={"model": self._model, "messages": messages},
        )

        if not response.is_success:
            message = _STATUS_MESSAGES.get(response.status_code)
            if message is not None:
                raise AIGatewayError(response.status_code, message)
            logger.error("AI gateway error: %s %s", response.status_code, response.text)
            raise AIGatewayError(500, "Error al generar resumen.")

        return _first_choice_content(response.json())


def _first_choice_content(data: Dict[str, Any]) -> Optional[str]:
    choices = data.get("choices") or []
    if not choices:
        return None
    message = choices[0].get("message") or {}
    return message.get("content")


def create_ai_gateway_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> ChatCompletionPort:
    return AIGatewayClient(http_client=http_client, settings=settings)
