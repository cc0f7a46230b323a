from .email import WelcomeEmailRequest, WelcomeEmailResponse
from .media import ExerciseGifRequest, ExerciseMedia
from .responses import ErrorResponse, SuccessResponse
from .summary import (
    ExerciseSummaryRequest,
    ExerciseSummaryResponse,
    SetLogForSummary,
)

__all__ = [
    'ErrorResponse',
    'ExerciseGifRequest',
    'ExerciseMedia',
    'ExerciseSummaryRequest',
    'ExerciseSummaryResponse',
    'SetLogForSummary',
    'SuccessResponse',
    'WelcomeEmailRequest',
    'WelcomeEmailResponse',
]
