"""Account existence checks against Supabase Auth."""

import logging
from dataclasses import dataclass
from typing import Any

from supabase import Client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    """Auth account data returned by the admin API."""

    user_id: str
    email: str | None = None
    created_at: Any = None


class IdentityVerifier:
    """Confirms that an identifier belongs to a real auth account."""

    def __init__(self, client: Client) -> None:
        """Initialize the verifier.

        Args:
            client: Supabase client created with the secret key, required
                for the auth admin API.
        """
        self.client = client

    async def verify(self, uid: str) -> Account | None:
        """Look up an auth account by ID.

        The identifier is passed through as-is. Provider errors, malformed
        identifiers and missing accounts all yield None; callers cannot
        tell an outage from an unknown account, so provider errors are
        logged at warning level.

        Args:
            uid: Auth account ID.

        Returns:
            Account | None: The account, or None if it could not be found.
        """
        try:
            response = self.client.auth.admin.get_user_by_id(uid)
        except Exception as e:
            logger.warning("Auth lookup failed for %s: %s", uid, e)
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None

        return Account(
            user_id=str(user.id),
            email=getattr(user, "email", None),
            created_at=getattr(user, "created_at", None),
        )
