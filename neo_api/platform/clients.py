from __future__ import annotations

import httpx
from fastapi import Request

HTTP_TIMEOUT_SECONDS = 30.0


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency that returns the app-scoped HTTP client."""
    return request.app.state.http_client


__all__ = ["HTTP_TIMEOUT_SECONDS", "create_http_client", "get_http_client"]
