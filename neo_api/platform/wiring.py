"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from ..accounts.application import AccountStorePort, DeleteAccountUseCase
from ..accounts.infrastructure import create_supabase_account_store
from ..mailer.application import EmailSenderPort, SendWelcomeEmailUseCase
from ..mailer.infrastructure import create_resend_sender
from ..media.application import ExerciseMediaCache
from ..media.infrastructure import create_exercisedb_resolver
from ..settings import Settings, get_settings
from ..summary.application import ChatCompletionPort, GenerateExerciseSummaryUseCase
from ..summary.infrastructure import create_ai_gateway_client
from .clients import get_http_client


def build_media_cache(http_client: httpx.AsyncClient, settings: Settings) -> ExerciseMediaCache:
    """Create the media cache over an ExerciseDB resolver bound to ``http_client``."""
    resolver = create_exercisedb_resolver(http_client=http_client, settings=settings)
    return ExerciseMediaCache(
        resolver,
        maxsize=settings.media_cache_maxsize,
        ttl=settings.media_cache_ttl_seconds,
    )


def provide_media_cache(request: Request) -> ExerciseMediaCache:
    """Return the media cache opened by the app lifespan."""
    return request.app.state.media_cache


def provide_chat_completion_port(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ChatCompletionPort:
    return create_ai_gateway_client(http_client=http_client, settings=settings)


def provide_email_sender(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> EmailSenderPort:
    return create_resend_sender(http_client=http_client, settings=settings)


def provide_account_store(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> AccountStorePort:
    return create_supabase_account_store(http_client=http_client, settings=settings)


def get_exercise_summary_use_case(
    gateway: ChatCompletionPort = Depends(provide_chat_completion_port),
) -> GenerateExerciseSummaryUseCase:
    return GenerateExerciseSummaryUseCase(gateway)


def get_welcome_email_use_case(
    sender: EmailSenderPort = Depends(provide_email_sender),
) -> SendWelcomeEmailUseCase:
    return SendWelcomeEmailUseCase(sender)


def get_delete_account_use_case(
    store: AccountStorePort = Depends(provide_account_store),
) -> DeleteAccountUseCase:
    return DeleteAccountUseCase(store)


__all__ = [
    "build_media_cache",
    "provide_media_cache",
    "provide_chat_completion_port",
    "provide_email_sender",
    "provide_account_store",
    "get_exercise_summary_use_case",
    "get_welcome_email_use_case",
    "get_delete_account_use_case",
]
