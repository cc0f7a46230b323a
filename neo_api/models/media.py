from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseGifRequest(BaseModel):
    """Lookup request for an exercise animation."""

    name: Optional[str] = Field(None, description="Exercise display name, Spanish or English.")


class ExerciseMedia(BaseModel):
    """Animation and catalogue details for one exercise."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gif_url: Optional[str] = Field(None, alias="gifUrl")
    name: Optional[str] = None
    target: Optional[str] = None
    body_part: Optional[str] = Field(None, alias="bodyPart")
    equipment: Optional[str] = None
