from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from ...models.email import WelcomeEmailResponse
from ..domain.templates import WELCOME_SUBJECT, render_welcome_html
from .ports import EmailSenderPort

logger = logging.getLogger(__name__)


@dataclass
class SendWelcomeEmailUseCase:
    """Send the onboarding email to a newly registered user."""

    sender: EmailSenderPort
    today: Callable[[], date] = field(default=date.today)

    async def __call__(self, email: str) -> WelcomeEmailResponse:
        message_id = await self.sender.send(
            to=email,
            subject=WELCOME_SUBJECT,
            html=render_welcome_html(self.today().year),
        )
        logger.info("Welcome email sent to %s", email)
        return WelcomeEmailResponse(success=True, id=message_id)


async def send_welcome_email_best_effort(
    use_case: SendWelcomeEmailUseCase, email: str
) -> bool:
    """Send the welcome email without ever raising.

    Returns whether the provider accepted the message.
    """
    try:
        await use_case(email)
    except Exception:
        logger.exception("Welcome email to %s failed", email)
        return False
    return True


__all__ = ["SendWelcomeEmailUseCase", "send_welcome_email_best_effort"]
