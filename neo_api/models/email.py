from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class WelcomeEmailRequest(BaseModel):
    email: Optional[str] = None


class WelcomeEmailResponse(BaseModel):
    success: bool
    id: Optional[str] = None
