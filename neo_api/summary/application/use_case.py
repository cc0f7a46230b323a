from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ...models.summary import (
    ExerciseSummaryRequest,
    ExerciseSummaryResponse,
    SetLogForSummary,
)
from ..domain.prompts import FALLBACK_SUMMARY, build_messages
from .ports import ChatCompletionPort

MessageBuilder = Callable[
    [str, Sequence[SetLogForSummary], Optional[float], str],
    List[Dict[str, str]],
]


@dataclass
class GenerateExerciseSummaryUseCase:
    """Explain recent progress on one exercise from its logged sets."""

    gateway: ChatCompletionPort
    message_builder: MessageBuilder = build_messages

    async def __call__(self, request: ExerciseSummaryRequest) -> ExerciseSummaryResponse:
        messages = self.message_builder(
            request.exercise_name,
            request.set_logs,
            request.pct_change,
            request.alert_type,
        )
        content = await self.gateway.complete(messages)
        return ExerciseSummaryResponse(summary=content or FALLBACK_SUMMARY)


__all__ = ["GenerateExerciseSummaryUseCase"]
