"""Achievement domain models."""

from collections.abc import Callable
from dataclasses import dataclass, field

from macro_tracker.domain.logs import DayLog
from macro_tracker.domain.profile import Profile


@dataclass(frozen=True)
class AchievementDefinition:
    """An unlockable award tested against a day's log."""

    id: str
    title: str
    description: str
    icon: str
    predicate: Callable[[DayLog, Profile], bool] = field(compare=False, repr=False)

    def is_satisfied(self, day_log: DayLog, profile: Profile) -> bool:
        """Return True when the day's log meets this achievement."""
        return self.predicate(day_log, profile)


@dataclass(frozen=True)
class AchievementStatus:
    """An achievement together with its locked state."""

    definition: AchievementDefinition
    unlocked: bool
