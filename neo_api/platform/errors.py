"""Exception handlers shared across routes."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

UPSTREAM_CONNECTION_FAILED = "UPSTREAM_CONNECTION_FAILED"


def _upstream_host(exc: httpx.RequestError) -> Optional[str]:
    try:
        return exc.request.url.host
    except RuntimeError:
        return None


async def upstream_connection_failed(
    request: Request, exc: httpx.RequestError
) -> JSONResponse:
    """Translate connection failures to a friendly 503 payload."""
    host = _upstream_host(exc)
    logger.warning("Upstream connection to %s failed on %s: %s", host, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={
            "error": UPSTREAM_CONNECTION_FAILED,
            "message": (
                "Could not connect to an upstream dependency service. "
                "Please try again shortly."
            ),
            "upstream_host": host,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type in (httpx.ConnectError, httpx.ConnectTimeout):
        app.add_exception_handler(exc_type, upstream_connection_failed)


__all__ = ["UPSTREAM_CONNECTION_FAILED", "register_exception_handlers"]
