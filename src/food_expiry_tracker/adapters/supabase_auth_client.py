"""Supabase Auth implementation of token validation."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from food_expiry_tracker.services.auth import AuthClient

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Validates access tokens with Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            logger.info("Rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
