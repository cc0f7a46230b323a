"""Ports for resolving exercise media."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...models.media import ExerciseMedia


class ExerciseDBUnavailableError(RuntimeError):
    """Raised when the exercise catalogue answers with an error status."""


@runtime_checkable
class MediaResolver(Protocol):
    """Port that turns an exercise display name into media details."""

    async def resolve(self, name: str) -> Optional[ExerciseMedia]:
        """Return media for ``name`` or ``None`` when nothing matches."""


__all__ = ["ExerciseDBUnavailableError", "MediaResolver"]
