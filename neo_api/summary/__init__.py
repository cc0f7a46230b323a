"""AI generated progress summaries."""

from .application import (
    AIGatewayError,
    ChatCompletionPort,
    GenerateExerciseSummaryUseCase,
    SummaryUnavailableError,
)
from .infrastructure import AIGatewayClient, create_ai_gateway_client

__all__ = [
    "AIGatewayClient",
    "AIGatewayError",
    "ChatCompletionPort",
    "GenerateExerciseSummaryUseCase",
    "SummaryUnavailableError",
    "create_ai_gateway_client",
]
