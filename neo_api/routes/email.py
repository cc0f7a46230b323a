from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..mailer.application import (
    EmailDeliveryError,
    EmailNotConfiguredError,
    SendWelcomeEmailUseCase,
)
from ..models.email import WelcomeEmailRequest, WelcomeEmailResponse
from ..platform.wiring import get_welcome_email_use_case

router: APIRouter = APIRouter()


@router.post("/send-welcome-email", response_model=WelcomeEmailResponse)
async def send_welcome_email(
    payload: WelcomeEmailRequest,
    use_case: SendWelcomeEmailUseCase = Depends(get_welcome_email_use_case),
) -> WelcomeEmailResponse:
    email = (payload.email or "").strip()
    if not email:
        raise HTTPException(status_code=400, detail={"error": "Email es requerido"})
    try:
        return await use_case(email)
    except EmailNotConfiguredError as exc:
        raise HTTPException(status_code=503, detail={"error": str(exc)}) from exc
    except EmailDeliveryError as exc:
        raise HTTPException(status_code=500, detail={"error": str(exc)}) from exc
