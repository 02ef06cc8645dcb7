"""Session resolution against the identity provider."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.sessions import SessionContext


class IdentityProvider(Protocol):
    """Interface for validating access tokens."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, or None."""


@dataclass
class SessionService:
    """Builds explicit session contexts for incoming requests."""

    identity_provider: IdentityProvider

    def resolve(self, access_token: str | None) -> SessionContext | None:
        """Return the caller's session; None when the token is rejected.

        Requests without a token are guests.
        """
        if not access_token:
            return SessionContext()
        user_id = self.identity_provider.get_user_id(access_token)
        if user_id is None:
            return None
        return SessionContext(user_id=user_id)
