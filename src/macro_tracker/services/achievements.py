"""Achievement definitions and evaluation."""

from collections.abc import Iterable

from macro_tracker.domain.achievements import AchievementDefinition, AchievementStatus
from macro_tracker.domain.logs import DayLog, MealType
from macro_tracker.domain.nutrients import WATER_GOAL_ML
from macro_tracker.domain.profile import Profile
from macro_tracker.services.aggregation import aggregate_day, total_water
from macro_tracker.services.logs import local_hour

EARLY_BIRD_BEFORE_HOUR = 9
NIGHT_OWL_FROM_HOUR = 20
HIGH_FIBER_GRAMS = 5


def _early_bird(day_log: DayLog, profile: Profile) -> bool:
    return any(
        item.meal_type == MealType.BREAKFAST
        and local_hour(item.timestamp, profile.timezone) < EARLY_BIRD_BEFORE_HOUR
        for item in day_log.items
    )


def _hydration_hero(day_log: DayLog, profile: Profile) -> bool:
    return total_water(day_log.water, day_log.day) >= WATER_GOAL_ML


def _protein_power(day_log: DayLog, profile: Profile) -> bool:
    return aggregate_day(day_log).protein >= profile.targets.protein


def _green_giant(day_log: DayLog, profile: Profile) -> bool:
    return any(item.nutrient("fiber") > HIGH_FIBER_GRAMS for item in day_log.items)


def _night_owl(day_log: DayLog, profile: Profile) -> bool:
    return any(
        item.meal_type == MealType.SNACK
        and local_hour(item.timestamp, profile.timezone) >= NIGHT_OWL_FROM_HOUR
        for item in day_log.items
    )


def _first_log(day_log: DayLog, profile: Profile) -> bool:
    return len(day_log.items) >= 1


ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="early-bird",
        title="Early Bird",
        description="Log breakfast before 9 AM",
        icon="🌅",
        predicate=_early_bird,
    ),
    AchievementDefinition(
        id="hydration-hero",
        title="Hydration Hero",
        description="Drink 2500ml of water",
        icon="💧",
        predicate=_hydration_hero,
    ),
    AchievementDefinition(
        id="protein-power",
        title="Protein Power",
        description="Hit your protein goal",
        icon="💪",
        predicate=_protein_power,
    ),
    AchievementDefinition(
        id="green-giant",
        title="Green Giant",
        description="Log a food with more than 5g of fiber",
        icon="🥦",
        predicate=_green_giant,
    ),
    AchievementDefinition(
        id="night-owl",
        title="Night Owl",
        description="Log a snack after 8 PM",
        icon="🦉",
        predicate=_night_owl,
    ),
    AchievementDefinition(
        id="first-log",
        title="First Log",
        description="Log your first meal",
        icon="🍽️",
        predicate=_first_log,
    ),
)


def evaluate(
    day_log: DayLog, profile: Profile, already_unlocked: Iterable[str]
) -> list[AchievementDefinition]:
    """Return achievements newly satisfied by the day, in definition order."""
    unlocked = set(already_unlocked)
    return [
        achievement
        for achievement in ACHIEVEMENTS
        if achievement.id not in unlocked
        and achievement.is_satisfied(day_log, profile)
    ]


def merge_unlocked(
    existing: Iterable[str], newly_unlocked: Iterable[AchievementDefinition]
) -> tuple[str, ...]:
    """Append new achievement ids once; existing ids are never removed."""
    merged = list(existing)
    for achievement in newly_unlocked:
        if achievement.id not in merged:
            merged.append(achievement.id)
    return tuple(merged)


def achievement_board(unlocked: Iterable[str]) -> list[AchievementStatus]:
    """Return every achievement with its locked state."""
    unlocked_ids = set(unlocked)
    return [
        AchievementStatus(definition=achievement, unlocked=achievement.id in unlocked_ids)
        for achievement in ACHIEVEMENTS
    ]
