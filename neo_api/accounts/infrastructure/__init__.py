"""Infrastructure adapters for account lifecycle."""

from .supabase import SupabaseAccountStore, create_supabase_account_store

__all__ = ["SupabaseAccountStore", "create_supabase_account_store"]
