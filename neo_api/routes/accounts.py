from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from ..accounts.application import (
    AccountDeletionError,
    DeleteAccountUseCase,
    InvalidUserError,
)
from ..models.responses import SuccessResponse
from ..platform.wiring import get_delete_account_use_case

router: APIRouter = APIRouter()


@router.post("/delete-account", response_model=SuccessResponse)
async def delete_account(
    authorization: Optional[str] = Header(None),
    use_case: DeleteAccountUseCase = Depends(get_delete_account_use_case),
) -> SuccessResponse:
    """Permanently erase the calling user's data and login."""
    if not authorization:
        raise HTTPException(status_code=401, detail={"error": "No authorization header"})
    try:
        return await use_case(authorization)
    except InvalidUserError as exc:
        raise HTTPException(status_code=401, detail={"error": "Invalid user"}) from exc
    except AccountDeletionError as exc:
        raise HTTPException(
            status_code=500, detail={"error": "Failed to delete account"}
        ) from exc
