"""Session validation against the hosted auth provider."""

from typing import Protocol
from uuid import UUID


class AuthClient(Protocol):
    """Interface for resolving access tokens to users."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, or None."""
