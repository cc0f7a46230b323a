"""Transactional email."""

from .application import (
    EmailDeliveryError,
    EmailNotConfiguredError,
    EmailSenderPort,
    SendWelcomeEmailUseCase,
    send_welcome_email_best_effort,
)
from .infrastructure import ResendEmailSender, create_resend_sender

__all__ = [
    "EmailDeliveryError",
    "EmailNotConfiguredError",
    "EmailSenderPort",
    "ResendEmailSender",
    "SendWelcomeEmailUseCase",
    "create_resend_sender",
    "send_welcome_email_best_effort",
]
