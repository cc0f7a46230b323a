"""Application layer for account lifecycle."""

from .deletion import USER_OWNED_TABLES, DeleteAccountUseCase
from .ports import AccountDeletionError, AccountStorePort, InvalidUserError

__all__ = [
    "AccountDeletionError",
    "AccountStorePort",
    "DeleteAccountUseCase",
    "InvalidUserError",
    "USER_OWNED_TABLES",
]
