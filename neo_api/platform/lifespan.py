"""Resources that live exactly as long as one application run."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from ..settings import get_settings
from .clients import create_http_client
from .wiring import build_media_cache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared HTTP pool and the media cache bound to it.

    Both are dropped from ``app.state`` on shutdown so a later run starts
    with a fresh client and an empty cache.
    """
    settings = get_settings()
    async with create_http_client() as client:
        app.state.http_client = client
        app.state.media_cache = build_media_cache(client, settings)
        logger.info(
            "Media cache ready (maxsize=%s, ttl=%s)",
            settings.media_cache_maxsize,
            settings.media_cache_ttl_seconds,
        )
        try:
            yield
        finally:
            del app.state.media_cache
            del app.state.http_client


__all__ = ["app_lifespan"]
