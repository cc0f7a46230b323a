"""Framework wiring shared by all routers."""

from .clients import get_http_client
from .errors import register_exception_handlers

__all__ = ["get_http_client", "register_exception_handlers"]
