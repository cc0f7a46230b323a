"""Application layer for exercise media lookups."""

from .cache import ABSENT, CachedMedia, ExerciseMediaCache
from .ports import ExerciseDBUnavailableError, MediaResolver

__all__ = [
    "ABSENT",
    "CachedMedia",
    "ExerciseDBUnavailableError",
    "ExerciseMediaCache",
    "MediaResolver",
]
