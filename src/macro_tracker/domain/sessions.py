"""Domain models for request sessions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class SessionContext:
    """Identity of the caller; no user id means guest mode."""

    user_id: UUID | None = None

    @property
    def is_guest(self) -> bool:
        """Return True when the caller is not signed in."""
        return self.user_id is None
