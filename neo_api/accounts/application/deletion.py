from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Tuple

from ...models.responses import SuccessResponse
from .ports import AccountStorePort

logger = logging.getLogger(__name__)

# Tables keyed directly by ``user_id``, children before parents.
USER_OWNED_TABLES: Final[Tuple[str, ...]] = (
    "supplement_notification_history",
    "supplement_logs",
    "supplement_reminders",
    "user_supplements",
    "food_logs",
    "nutrition_goals",
    "set_logs",
    "exercise_notes",
    "completed_sessions",
    "activity_completions",
    "cardio_session_intervals",
    "cardio_session_logs",
    "profiles",
)


@dataclass
class DeleteAccountUseCase:
    """Erase every row owned by the caller, then the auth user itself."""

    store: AccountStorePort

    async def __call__(self, authorization: str) -> SuccessResponse:
        user_id = await self.store.get_user_id(authorization)

        for table in USER_OWNED_TABLES:
            await self.store.delete_rows(table, "user_id", [user_id])

        await self._delete_programs(user_id)

        await self.store.delete_auth_user(user_id)
        logger.info("Deleted account %s", user_id)
        return SuccessResponse(success=True)

    async def _delete_programs(self, user_id: str) -> None:
        # exercises -> workout_sessions -> training_programs
        program_ids = await self.store.select_ids("training_programs", "user_id", [user_id])
        if not program_ids:
            return

        session_ids = await self.store.select_ids(
            "workout_sessions", "program_id", program_ids
        )
        if session_ids:
            await self.store.delete_rows("exercises", "session_id", session_ids)
            await self.store.delete_rows("workout_sessions", "program_id", program_ids)

        await self.store.delete_rows("training_programs", "user_id", [user_id])


__all__ = ["DeleteAccountUseCase", "USER_OWNED_TABLES"]
