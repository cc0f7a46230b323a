from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SetLogForSummary(BaseModel):
    """Single logged set as sent by the progress screen."""

    date: str
    weight: float
    reps: int
    rir: Optional[float] = None
    est_1rm: Optional[float] = None


class ExerciseSummaryRequest(BaseModel):
    """Input for the AI generated progress summary."""

    model_config = ConfigDict(populate_by_name=True)

    exercise_name: str = Field(..., alias="exerciseName")
    set_logs: List[SetLogForSummary] = Field(default_factory=list, alias="setLogs")
    pct_change: Optional[float] = Field(None, alias="pctChange")
    alert_type: str = Field("plateau", alias="alertType")


class ExerciseSummaryResponse(BaseModel):
    summary: str
