"""Ports for the exercise summary application layer."""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, runtime_checkable


class SummaryUnavailableError(RuntimeError):
    """Raised when no AI gateway credentials are configured."""


class AIGatewayError(RuntimeError):
    """Raised when the AI gateway rejects a completion request."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@runtime_checkable
class ChatCompletionPort(Protocol):
    """Port for chat style text generation."""

    async def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        """Return the assistant reply, or ``None`` when the reply is empty."""


__all__ = ["AIGatewayError", "ChatCompletionPort", "SummaryUnavailableError"]
