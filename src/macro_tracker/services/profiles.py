"""Profile lifecycle service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.achievements import AchievementDefinition
from macro_tracker.domain.errors import LogDateMismatchError
from macro_tracker.domain.profile import Preferences, Profile
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.achievements import merge_unlocked
from macro_tracker.services.targets import apply_targets

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile for a user, if present."""

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Create or replace the full profile row."""

    def update_profile(self, user_id: UUID, profile: Profile) -> None:
        """Update body stats, timezone, preferences and targets."""

    def update_preferences(self, user_id: UUID, preferences: Preferences) -> None:
        """Update only the preference bag."""

    def set_premium(self, user_id: UUID, is_premium: bool) -> None:
        """Update the premium flag."""


@dataclass
class ProfileService:
    """Application service for profile reads and edits."""

    repository: ProfileRepository

    def get_profile(self, session: SessionContext) -> Profile:
        """Return the stored profile, or defaults for guests and new users."""
        if session.is_guest:
            return Profile()
        return self.repository.get_profile(session.user_id) or Profile()

    def complete_onboarding(self, session: SessionContext, draft: Profile) -> Profile:
        """Compute targets for an onboarding draft and store it."""
        profile = replace(apply_targets(draft), has_onboarded=True, is_premium=False)
        if not session.is_guest:
            self.repository.upsert_profile(session.user_id, profile)
        return profile

    def update_profile(self, session: SessionContext, profile: Profile) -> Profile:
        """Recompute targets after a body stat or goal edit."""
        updated = apply_targets(profile)
        self._persist(session, updated)
        return updated

    def update_micronutrient_targets(  # noqa: PLR0913
        self,
        session: SessionContext,
        *,
        fiber: int,
        sugar: int,
        sodium: int,
        cholesterol: int,
    ) -> Profile:
        """Explicitly edit the targets the calculator leaves alone."""
        profile = self.get_profile(session)
        updated = replace(
            profile,
            targets=replace(
                profile.targets,
                fiber=fiber,
                sugar=sugar,
                sodium=sodium,
                cholesterol=cholesterol,
            ),
        )
        self._persist(session, updated)
        return updated

    def subscribe(self, session: SessionContext) -> Profile:
        """Mark the user as premium."""
        profile = replace(self.get_profile(session), is_premium=True)
        if not session.is_guest:
            self.repository.set_premium(session.user_id, True)
        return profile

    def record_unlocks(
        self,
        session: SessionContext,
        profile: Profile,
        achievements: list[AchievementDefinition],
    ) -> Profile:
        """Merge newly unlocked achievements into the preference bag.

        Only the preferences column is written.
        """
        if not achievements:
            return profile
        preferences = replace(
            profile.preferences,
            unlocked_awards=merge_unlocked(
                profile.preferences.unlocked_awards, achievements
            ),
        )
        if not session.is_guest:
            try:
                self.repository.update_preferences(session.user_id, preferences)
            except Exception:
                logger.exception(
                    "Failed to record achievements", extra={"user_id": session.user_id}
                )
        return replace(profile, preferences=preferences)

    def _persist(self, session: SessionContext, profile: Profile) -> None:
        if session.is_guest:
            return
        try:
            self.repository.update_profile(session.user_id, profile)
        except Exception:
            logger.exception(
                "Failed to persist profile", extra={"user_id": session.user_id}
            )
