"""Application layer for transactional email."""

from .ports import EmailDeliveryError, EmailNotConfiguredError, EmailSenderPort
from .welcome import SendWelcomeEmailUseCase, send_welcome_email_best_effort

__all__ = [
    "EmailDeliveryError",
    "EmailNotConfiguredError",
    "EmailSenderPort",
    "SendWelcomeEmailUseCase",
    "send_welcome_email_best_effort",
]
