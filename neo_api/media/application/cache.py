"""Memoized exercise media lookups."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Final, Optional, Union

from ...models.media import ExerciseMedia
from .ports import MediaResolver

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for a lookup that finished without finding media."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()

CachedMedia = Union[ExerciseMedia, _Absent]


@dataclass
class _Entry:
    value: CachedMedia
    expires_at: Optional[float]


class ExerciseMediaCache:
    """Per-key memo over a :class:`MediaResolver`.

    Each key is resolved at most once while its entry lives in the cache.
    Failed and empty lookups are stored as :data:`ABSENT` and are not retried.
    Entries are evicted least recently used first once ``maxsize`` is reached
    and, when ``ttl`` is set, expire ``ttl`` seconds after they were stored.

    Concurrent callers asking for the same uncached key share a single
    in-flight resolution. Cancelling one caller does not cancel the shared
    lookup, so its result still lands in the cache.
    """

    def __init__(
        self,
        resolver: MediaResolver,
        *,
        maxsize: int = 512,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive")
        self._resolver = resolver
        self._maxsize = maxsize
        self._ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[str, _Entry]" = OrderedDict()
        self._inflight: Dict[str, "asyncio.Future[CachedMedia]"] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.peek(key) is not None

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def peek(self, key: str) -> Optional[CachedMedia]:
        """Return the cached value without resolving.

        ``None`` means the key was never resolved (or its entry is gone);
        :data:`ABSENT` means it was resolved and nothing was found.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry.value

    async def resolve(self, key: str) -> CachedMedia:
        cached = self.peek(key)
        if cached is not None:
            return cached

        pending = self._inflight.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._lookup(key))
            self._inflight[key] = pending
        return await asyncio.shield(pending)

    def invalidate(self, key: str) -> None:
        """Forget ``key``. A lookup already in flight will not store its result."""
        self._entries.pop(key, None)
        self._inflight.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self._inflight.clear()

    async def _lookup(self, key: str) -> CachedMedia:
        task = asyncio.current_task()
        try:
            value = await self._fetch(key)
            # Only the registered lookup for ``key`` may write the entry.
            if self._inflight.get(key) is task:
                self._store(key, value)
            return value
        finally:
            if self._inflight.get(key) is task:
                del self._inflight[key]

    async def _fetch(self, key: str) -> CachedMedia:
        try:
            media = await self._resolver.resolve(key)
        except Exception:
            logger.exception("Error fetching exercise media for %r", key)
            return ABSENT
        if media is None or not media.gif_url:
            logger.info("No exercise media found for %r", key)
            return ABSENT
        return media

    def _store(self, key: str, value: CachedMedia) -> None:
        expires_at = None if self._ttl is None else self._clock() + self._ttl
        self._entries[key] = _Entry(value, expires_at)
        self._entries.move_to_end(key)
        while len(self._entries) > self._maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted exercise media for %r", evicted)


__all__ = ["ABSENT", "CachedMedia", "ExerciseMediaCache"]
