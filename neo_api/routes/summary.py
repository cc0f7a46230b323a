from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..models.summary import ExerciseSummaryRequest, ExerciseSummaryResponse
from ..platform.wiring import get_exercise_summary_use_case
from ..summary.application import (
    AIGatewayError,
    GenerateExerciseSummaryUseCase,
    SummaryUnavailableError,
)

router: APIRouter = APIRouter()


@router.post("/exercise-summary", response_model=ExerciseSummaryResponse)
async def summarize_exercise(
    payload: ExerciseSummaryRequest,
    use_case: GenerateExerciseSummaryUseCase = Depends(get_exercise_summary_use_case),
) -> ExerciseSummaryResponse:
    try:
        return await use_case(payload)
    except SummaryUnavailableError as exc:
        raise HTTPException(status_code=503, detail={"error": str(exc)}) from exc
    except AIGatewayError as exc:
        raise HTTPException(status_code=exc.status_code, detail={"error": exc.message}) from exc
