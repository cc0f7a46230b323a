"""Account lifecycle operations."""

from .application import (
    USER_OWNED_TABLES,
    AccountDeletionError,
    AccountStorePort,
    DeleteAccountUseCase,
    InvalidUserError,
)
from .infrastructure import SupabaseAccountStore, create_supabase_account_store

__all__ = [
    "AccountDeletionError",
    "AccountStorePort",
    "DeleteAccountUseCase",
    "InvalidUserError",
    "SupabaseAccountStore",
    "USER_OWNED_TABLES",
    "create_supabase_account_store",
]
