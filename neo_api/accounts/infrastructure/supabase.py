"""Supabase REST implementation of the account store port."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import httpx

from ...settings import Settings
from ..application.ports import (
    AccountDeletionError,
    AccountStorePort,
    InvalidUserError,
)

logger = logging.getLogger(__name__)


def _filter(values: Sequence[str]) -> str:
    if len(values) == 1:
        return f"eq.{values[0]}"
    return f"in.({','.join(values)})"


class SupabaseAccountStore(AccountStorePort):
    """Talk to Supabase auth and PostgREST endpoints."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._base_url = settings.supabase_url.rstrip("/")
        self._anon_key = settings.supabase_anon_key
        self._service_headers: Dict[str, str] = {
            "apikey": settings.supabase_service_role_key,
            "Authorization": f"Bearer {settings.supabase_service_role_key}",
        }

    async def get_user_id(self, authorization: str) -> str:
        response = await self._http_client.get(
            f"{self._base_url}/auth/v1/user",
            headers={"apikey": self._anon_key, "Authorization": authorization},
        )
        if response.status_code != 200:
            raise InvalidUserError("Invalid user")
        user_id = response.json().get("id")
        if not user_id:
            raise InvalidUserError("Invalid user")
        return user_id

    async def select_ids(self, table: str, column: str, values: Sequence[str]) -> List[str]:
        response = await self._http_client.get(
            f"{self._base_url}/rest/v1/{table}",
            headers=self._service_headers,
            params={"select": "id", column: _filter(values)},
        )
        if not response.is_success:
            logger.error("Selecting %s failed: %s %s", table, response.status_code, response.text)
            raise AccountDeletionError(f"Could not read {table}")
        return [str(row["id"]) for row in response.json()]

    async def delete_rows(self, table: str, column: str, values: Sequence[str]) -> None:
        response = await self._http_client.delete(
            f"{self._base_url}/rest/v1/{table}",
            headers=self._service_headers,
            params={column: _filter(values)},
        )
        if not response.is_success:
            logger.error("Deleting from %s failed: %s %s", table, response.status_code, response.text)
            raise AccountDeletionError(f"Could not delete rows from {table}")

    async def delete_auth_user(self, user_id: str) -> None:
        response = await self._http_client.delete(
            f"{self._base_url}/auth/v1/admin/users/{user_id}",
            headers=self._service_headers,
        )
        if not response.is_success:
            logger.error("Error deleting auth user: %s %s", response.status_code, response.text)
            raise AccountDeletionError("Failed to delete auth user")


def create_supabase_account_store(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> AccountStorePort:
    return SupabaseAccountStore(http_client=http_client, settings=settings)
