"""Infrastructure adapters for outbound email."""

from .resend import ResendEmailSender, create_resend_sender

__all__ = ["ResendEmailSender", "create_resend_sender"]
