"""Supabase client singleton for auth, database and storage operations."""

from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from profile_api.core.config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton.

    Uses the secret key, which bypasses RLS and grants access to the auth
    admin API. Only hand this client to server-side collaborators; the
    profile service never exposes it to callers.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Performs a single-row query against the profiles table.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table(get_settings().profiles_table).select("uid").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}
