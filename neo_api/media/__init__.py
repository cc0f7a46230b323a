"""Exercise media lookups backed by ExerciseDB."""

from .application import (
    ABSENT,
    CachedMedia,
    ExerciseDBUnavailableError,
    ExerciseMediaCache,
    MediaResolver,
)
from .domain import search_term_for
from .infrastructure import ExerciseDBClient, create_exercisedb_resolver

__all__ = [
    "ABSENT",
    "CachedMedia",
    "ExerciseDBClient",
    "ExerciseDBUnavailableError",
    "ExerciseMediaCache",
    "MediaResolver",
    "create_exercisedb_resolver",
    "search_term_for",
]
