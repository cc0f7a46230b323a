"""Ports for account lifecycle operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence


class InvalidUserError(RuntimeError):
    """Raised when the caller's token does not resolve to a user."""


class AccountDeletionError(RuntimeError):
    """Raised when the data store refuses part of an account deletion."""


class AccountStorePort(ABC):
    """Interface over the user store used to erase an account."""

    @abstractmethod
    async def get_user_id(self, authorization: str) -> str:
        """Return the id of the user owning ``authorization``."""

    @abstractmethod
    async def select_ids(self, table: str, column: str, values: Sequence[str]) -> List[str]:
        """Return ``id`` of every row in ``table`` whose ``column`` is in ``values``."""

    @abstractmethod
    async def delete_rows(self, table: str, column: str, values: Sequence[str]) -> None:
        """Delete every row in ``table`` whose ``column`` is in ``values``."""

    @abstractmethod
    async def delete_auth_user(self, user_id: str) -> None:
        """Remove the authentication record for ``user_id``."""
