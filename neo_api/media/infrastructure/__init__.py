"""Infrastructure adapters for exercise media."""

from .exercisedb import ExerciseDBClient, create_exercisedb_resolver

__all__ = ["ExerciseDBClient", "create_exercisedb_resolver"]
