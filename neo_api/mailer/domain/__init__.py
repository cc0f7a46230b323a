from .templates import WELCOME_SUBJECT, render_welcome_html

__all__ = ["WELCOME_SUBJECT", "render_welcome_html"]
