from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..media.application import ABSENT, ExerciseMediaCache
from ..models.media import ExerciseGifRequest, ExerciseMedia
from ..platform.wiring import provide_media_cache

router: APIRouter = APIRouter()


@router.post("/exercise-gif", response_model=ExerciseMedia)
async def lookup_exercise_gif(
    payload: ExerciseGifRequest,
    cache: ExerciseMediaCache = Depends(provide_media_cache),
) -> ExerciseMedia:
    """Return the animation for an exercise, looked up at most once per name."""
    name = (payload.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail={"error": "Exercise name is required"})

    media = await cache.resolve(name)
    if media is ABSENT:
        return ExerciseMedia(gif_url=None)
    return media
