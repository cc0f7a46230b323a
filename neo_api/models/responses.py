from __future__ import annotations

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement returned by mutation endpoints."""

    success: bool = Field(True, description="Whether the operation completed.")


class ErrorResponse(BaseModel):
    error: str
