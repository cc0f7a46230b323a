"""HTTP-backed implementation of the media resolver port."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ...models.media import ExerciseMedia
from ...settings import Settings
from ..application.ports import ExerciseDBUnavailableError, MediaResolver
from ..domain.names import search_term_for

logger = logging.getLogger(__name__)


class ExerciseDBClient(MediaResolver):
    """Search ExerciseDB for the best matching exercise animation."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._base_url = settings.exercisedb_base_url.rstrip("/")

    async def resolve(self, name: str) -> Optional[ExerciseMedia]:
        term = search_term_for(name)
        logger.info("Searching ExerciseDB for %r (requested as %r)", term, name)

        response = await self._http_client.get(
            f"{self._base_url}/search",
            params={"q": term, "limit": 1},
            headers={"Accept": "application/json"},
        )
        if not response.is_success:
            logger.error("ExerciseDB API error: %s", response.status_code)
            raise ExerciseDBUnavailableError(
                f"ExerciseDB answered with status {response.status_code}"
            )

        exercises = _extract_exercises(response.json())
        if not exercises:
            return None
        return _to_media(exercises[0])


def _extract_exercises(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, dict):
        payload = payload.get("data") or []
    if not isinstance(payload, list):
        return []
    return [item for item in payload if isinstance(item, dict)]


def _to_media(exercise: Dict[str, Any]) -> ExerciseMedia:
    return ExerciseMedia(
        gif_url=exercise.get("gifUrl") or exercise.get("gif_url"),
        name=exercise.get("name"),
        target=exercise.get("target"),
        body_part=exercise.get("bodyPart") or exercise.get("body_part"),
        equipment=exercise.get("equipment"),
    )


def create_exercisedb_resolver(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> MediaResolver:
    """Create an ExerciseDB resolver without FastAPI dependencies."""
    return ExerciseDBClient(http_client=http_client, settings=settings)
