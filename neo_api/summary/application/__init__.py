"""Application layer for AI exercise summaries."""

from .ports import AIGatewayError, ChatCompletionPort, SummaryUnavailableError
from .use_case import GenerateExerciseSummaryUseCase

__all__ = [
    "AIGatewayError",
    "ChatCompletionPort",
    "GenerateExerciseSummaryUseCase",
    "SummaryUnavailableError",
]
