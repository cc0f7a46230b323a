"""Shared test fixtures and doubles."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from neo_api import main
from neo_api.accounts.application import (
    AccountDeletionError,
    AccountStorePort,
    InvalidUserError,
)
from neo_api.mailer.application import EmailSenderPort
from neo_api.media.application import ExerciseMediaCache, MediaResolver
from neo_api.models.media import ExerciseMedia
from neo_api.platform.wiring import (
    provide_account_store,
    provide_chat_completion_port,
    provide_email_sender,
    provide_media_cache,
)
from neo_api.settings import Settings, get_settings
from neo_api.summary.application import ChatCompletionPort

from tests.fakes import ManualTickSource


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class MediaResolverFake(MediaResolver):
    """Resolver double that counts lookups and can hold them open."""

    def __init__(self) -> None:
        self.results: Dict[str, Any] = {}
        self.calls: List[str] = []
        self.gate: asyncio.Event | None = None

    def with_result(self, name: str, result: Any) -> "MediaResolverFake":
        """Return ``result`` (or raise it, for exceptions) when ``name`` is resolved."""

        self.results[name] = result
        return self

    def hold(self) -> asyncio.Event:
        """Block lookups until the returned event is set."""

        self.gate = asyncio.Event()
        return self.gate

    async def resolve(self, name: str) -> Optional[ExerciseMedia]:
        self.calls.append(name)
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.get(name)
        if isinstance(result, Exception):
            raise result
        return result


class ChatCompletionStub(ChatCompletionPort):
    """Stubbed chat completion port with expectation helpers."""

    def __init__(self) -> None:
        self._expectations: list[_Expectation] = []
        self.requests: list[List[Dict[str, str]]] = []

    def expect_complete(
        self, *, returns: Optional[str] = None, raises: Exception | None = None
    ) -> "ChatCompletionStub":
        self._expectations.append(_Expectation({}, returns, raises))
        return self

    def last_messages(self) -> List[Dict[str, str]]:
        assert self.requests, "complete() was not called"
        return self.requests[-1]

    async def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        self.requests.append(messages)
        if self._expectations:
            expectation = self._expectations.pop(0)
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return None


class EmailSenderFake(EmailSenderPort):
    """Records outgoing messages in memory."""

    def __init__(self) -> None:
        self.sent: list[Dict[str, str]] = []
        self.message_id: Optional[str] = "email-1"
        self.raises: Exception | None = None

    async def send(self, *, to: str, subject: str, html: str) -> Optional[str]:
        if self.raises is not None:
            raise self.raises
        self.sent.append({"to": to, "subject": subject, "html": html})
        return self.message_id


class AccountStoreFake(AccountStorePort):
    """In-memory user store keyed by table name."""

    def __init__(self) -> None:
        self.tokens: Dict[str, str] = {}
        self.rows: Dict[str, List[Dict[str, str]]] = {}
        self.auth_users: set[str] = set()
        self.operations: list[tuple[str, str, str, tuple[str, ...]]] = []
        self.fail_on_delete: set[str] = set()

    def with_user(self, user_id: str, token: str) -> "AccountStoreFake":
        self.tokens[f"Bearer {token}"] = user_id
        self.auth_users.add(user_id)
        return self

    def with_rows(self, table: str, rows: Sequence[Dict[str, str]]) -> "AccountStoreFake":
        self.rows.setdefault(table, []).extend(dict(row) for row in rows)
        return self

    def deleted_tables(self) -> list[str]:
        return [table for op, table, _, _ in self.operations if op == "delete"]

    async def get_user_id(self, authorization: str) -> str:
        user_id = self.tokens.get(authorization)
        if user_id is None:
            raise InvalidUserError("Invalid user")
        return user_id

    async def select_ids(self, table: str, column: str, values: Sequence[str]) -> List[str]:
        self.operations.append(("select", table, column, tuple(values)))
        return [row["id"] for row in self.rows.get(table, []) if row.get(column) in values]

    async def delete_rows(self, table: str, column: str, values: Sequence[str]) -> None:
        self.operations.append(("delete", table, column, tuple(values)))
        if table in self.fail_on_delete:
            raise AccountDeletionError(f"Could not delete rows from {table}")
        self.rows[table] = [
            row for row in self.rows.get(table, []) if row.get(column) not in values
        ]

    async def delete_auth_user(self, user_id: str) -> None:
        self.operations.append(("delete_auth", "auth.users", "id", (user_id,)))
        if "auth.users" in self.fail_on_delete:
            raise AccountDeletionError("Failed to delete auth user")
        self.auth_users.discard(user_id)


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        supabase_url="https://supabase.example.com",
        supabase_anon_key="anon-key",
        supabase_service_role_key="service-key",
        exercisedb_base_url="https://exercisedb.example.com/api/v1/exercises",
        ai_gateway_url="https://ai.example.com/v1/chat/completions",
        ai_gateway_api_key="ai-key",
        resend_api_url="https://resend.example.com/emails",
        resend_api_key="resend-key",
    )


@pytest.fixture
def ticks() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def media_resolver_fake() -> MediaResolverFake:
    return MediaResolverFake()


@pytest.fixture
def media_cache(media_resolver_fake: MediaResolverFake) -> ExerciseMediaCache:
    return ExerciseMediaCache(media_resolver_fake)


@pytest.fixture
def chat_completion_stub() -> ChatCompletionStub:
    return ChatCompletionStub()


@pytest.fixture
def email_sender_fake() -> EmailSenderFake:
    return EmailSenderFake()


@pytest.fixture
def account_store_fake() -> AccountStoreFake:
    return AccountStoreFake()


@pytest.fixture
def app(
    settings: Settings,
    media_cache: ExerciseMediaCache,
    chat_completion_stub: ChatCompletionStub,
    email_sender_fake: EmailSenderFake,
    account_store_fake: AccountStoreFake,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        provide_media_cache: lambda: media_cache,
        provide_chat_completion_port: lambda: chat_completion_stub,
        provide_email_sender: lambda: email_sender_fake,
        provide_account_store: lambda: account_store_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client


@pytest.fixture
def api_headers(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key}
