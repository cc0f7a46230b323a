from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting providers expose upper-case variable names (e.g. ``RESEND_API_KEY``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    supabase_url: str
    supabase_anon_key: str
    supabase_service_role_key: str

    exercisedb_base_url: str = "https://exercisedb.dev/api/v1/exercises"
    media_cache_maxsize: int = 512
    media_cache_ttl_seconds: Optional[float] = None

    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    ai_gateway_api_key: Optional[str] = None
    ai_model: str = "google/gemini-2.5-flash-lite"

    resend_api_url: str = "https://api.resend.com/emails"
    resend_api_key: Optional[str] = None
    email_from: str = "NEO Fitness <onboarding@resend.dev>"

    rest_timer_default_seconds: int = 120


@lru_cache()
def get_settings() -> Settings:
    return Settings()
