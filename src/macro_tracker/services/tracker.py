"""Food and water logging service.

Every mutation is applied to the in-memory day log first and then handed to
the store by a separate persist step. A failed write is logged and never
rolls back the returned log.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from macro_tracker.domain.achievements import AchievementDefinition
from macro_tracker.domain.errors import LogDateMismatchError
from macro_tracker.domain.logs import DayLog, FoodDraft, FoodLogEntry, WaterEntry
from macro_tracker.domain.profile import Profile
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.achievements import evaluate
from macro_tracker.services.logs import (
    add_food_entry,
    add_water,
    local_day,
    meal_type_for,
)
from macro_tracker.services.profiles import ProfileService

logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food log entries."""

    def list_entries(self, user_id: UUID, day: str) -> list[FoodLogEntry]:
        """Return a user's food entries for a date, newest first."""

    def create_entry(self, user_id: UUID, entry: FoodLogEntry) -> None:
        """Insert a food entry row."""


class WaterLogRepository(Protocol):
    """Persistence interface for water increments."""

    def list_entries(self, user_id: UUID, day: str) -> list[WaterEntry]:
        """Return a user's water increments for a date."""

    def create_entry(self, user_id: UUID, entry: WaterEntry) -> None:
        """Insert a water increment row."""


def _now_ms() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)


@dataclass
class LogResult:
    """Updated day log plus any achievements the change unlocked."""

    day_log: DayLog
    profile: Profile
    unlocked: list[AchievementDefinition]

    @property
    def celebration(self) -> AchievementDefinition | None:
        """The achievement to celebrate, if any; only the first one is shown."""
        return self.unlocked[0] if self.unlocked else None


@dataclass
class TrackerService:
    """Service for reading day logs and logging food and water."""

    food_repository: FoodLogRepository
    water_repository: WaterLogRepository
    profile_service: ProfileService
    clock: Callable[[], int] = field(default=_now_ms)

    def get_day_log(self, session: SessionContext, day: str) -> DayLog:
        """Load the day's food and water entries; guests get an empty log."""
        if session.is_guest:
            return DayLog(day=day)
        items = self.food_repository.list_entries(session.user_id, day)
        water = self.water_repository.list_entries(session.user_id, day)
        return DayLog(day=day, items=tuple(items), water=tuple(water))

    def log_food(self, session: SessionContext, day: str, draft: FoodDraft) -> LogResult:
        """Add a reviewed food to the day and evaluate achievements.

        A capture timestamp must fall on ``day`` in the profile's timezone.
        """
        profile = self.profile_service.get_profile(session)
        if draft.timestamp is None:
            timestamp = self.clock()
        else:
            timestamp = draft.timestamp
            captured_on = local_day(timestamp, profile.timezone)
            if captured_on != day:
                raise LogDateMismatchError(
                    f"Food captured on {captured_on} cannot be logged for {day}"
                )
        entry = FoodLogEntry(
            id=uuid4(),
            name=draft.name,
            day=day,
            timestamp=timestamp,
            meal_type=meal_type_for(timestamp, profile.timezone),
            calories=draft.calories,
            protein=draft.protein,
            carbs=draft.carbs,
            fat=draft.fat,
            fiber=draft.fiber,
            sugar=draft.sugar,
            sodium=draft.sodium,
            cholesterol=draft.cholesterol,
            image_url=draft.image_url,
            confidence=draft.confidence,
        )
        day_log = add_food_entry(self.get_day_log(session, day), entry)
        self.persist_food_entry(session, entry)
        return self._with_achievements(session, profile, day_log)

    def log_water(self, session: SessionContext, day: str, amount_ml: int) -> LogResult:
        """Add a water increment to the day and evaluate achievements."""
        profile = self.profile_service.get_profile(session)
        current = self.get_day_log(session, day)
        day_log = add_water(current, amount_ml, self.clock())
        if day_log is current:
            logger.info("Ignoring non-positive water amount", extra={"amount": amount_ml})
            return LogResult(day_log=day_log, profile=profile, unlocked=[])
        self.persist_water_entry(session, day_log.water[-1])
        return self._with_achievements(session, profile, day_log)

    def persist_food_entry(self, session: SessionContext, entry: FoodLogEntry) -> None:
        """Write a food entry to the store; failures are only logged."""
        if session.is_guest:
            return
        try:
            self.food_repository.create_entry(session.user_id, entry)
        except Exception:
            logger.exception("Failed to save food entry", extra={"entry_id": entry.id})

    def persist_water_entry(self, session: SessionContext, entry: WaterEntry) -> None:
        """Write a water increment to the store; failures are only logged."""
        if session.is_guest:
            return
        try:
            self.water_repository.create_entry(session.user_id, entry)
        except Exception:
            logger.exception("Failed to save water entry", extra={"day": entry.day})

    def _with_achievements(
        self, session: SessionContext, profile: Profile, day_log: DayLog
    ) -> LogResult:
        unlocked = evaluate(day_log, profile, profile.preferences.unlocked_awards)
        updated = self.profile_service.record_unlocks(session, profile, unlocked)
        return LogResult(day_log=day_log, profile=updated, unlocked=unlocked)
