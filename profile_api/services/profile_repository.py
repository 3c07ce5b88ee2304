"""Profile persistence in the Supabase profiles table."""

from typing import Any

from supabase import Client

from profile_api.models.profile import Profile


class ProfileRepository:
    """Keyed store of one profile row per auth account."""

    def __init__(self, client: Client, table: str = "profiles") -> None:
        self.client = client
        self.table = table

    async def get(self, uid: str) -> Profile | None:
        """Get a profile by account ID.

        Args:
            uid: Auth account ID.

        Returns:
            Profile | None: The stored row, or None if absent.
        """
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("uid", uid)
            .maybe_single()
            .execute()
        )

        # maybe_single() yields no response at all when the row is missing
        if response is None or not response.data:
            return None
        return response.data

    async def put(self, uid: str, record: dict[str, Any]) -> Profile:
        """Overwrite the profile row for an account.

        Every column is written; merging partial input is the caller's job.

        Args:
            uid: Auth account ID.
            record: Complete profile row.

        Returns:
            Profile: The row as stored.
        """
        row = {**record, "uid": uid}
        response = (
            self.client.table(self.table)
            .upsert(row, on_conflict="uid")
            .execute()
        )

        return response.data[0] if response.data else row
