"""Ports for outbound email."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class EmailNotConfiguredError(RuntimeError):
    """Raised when the email provider has no API key."""


class EmailDeliveryError(RuntimeError):
    """Raised when the email provider rejects a message."""


class EmailSenderPort(ABC):
    """Interface describing outbound email delivery."""

    @abstractmethod
    async def send(self, *, to: str, subject: str, html: str) -> Optional[str]:
        """Deliver a message and return the provider's message id."""
