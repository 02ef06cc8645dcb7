"""Daily progress assembly for dashboards."""

from macro_tracker.domain.logs import MEAL_ORDER, DayLog, FoodLogEntry, MealType
from macro_tracker.domain.nutrients import (
    CALORIES,
    CARBS,
    CHOLESTEROL,
    FAT,
    FAT_LIMIT,
    FIBER,
    PROTEIN,
    SODIUM,
    SUGAR,
    WATER,
    WATER_GOAL_ML,
    NutrientDefinition,
    NutrientTotals,
)
from macro_tracker.domain.profile import Profile, Targets
from macro_tracker.domain.progress import DailyProgress, NutrientProgress
from macro_tracker.services.aggregation import aggregate_day, total_water
from macro_tracker.services.goals import compare

MACRO_GAUGES = (FAT, CARBS, PROTEIN)
TARGET_NUTRIENTS = (FIBER, PROTEIN)
LIMIT_NUTRIENTS = (SUGAR, CHOLESTEROL, SODIUM, FAT_LIMIT)


def build_progress(day_log: DayLog, profile: Profile) -> DailyProgress:
    """Compare a day's totals against the profile's targets."""
    totals = aggregate_day(day_log)
    targets = profile.targets

    def measure(nutrient: NutrientDefinition) -> NutrientProgress:
        return NutrientProgress(
            nutrient=nutrient,
            progress=compare(
                _total_for(totals, nutrient),
                _target_for(targets, nutrient),
                nutrient.kind,
                nutrient.unit,
            ),
        )

    return DailyProgress(
        day=day_log.day,
        calories=measure(CALORIES),
        macros=[measure(nutrient) for nutrient in MACRO_GAUGES],
        target_nutrients=[measure(nutrient) for nutrient in TARGET_NUTRIENTS],
        limit_nutrients=[measure(nutrient) for nutrient in LIMIT_NUTRIENTS],
        water=NutrientProgress(
            nutrient=WATER,
            progress=compare(
                total_water(day_log.water, day_log.day),
                WATER_GOAL_ML,
                WATER.kind,
                WATER.unit,
            ),
        ),
        meals=group_meals(day_log),
    )


def group_meals(day_log: DayLog) -> dict[MealType, list[FoodLogEntry]]:
    """Group a day's items by meal slot, skipping empty slots."""
    grouped: dict[MealType, list[FoodLogEntry]] = {}
    for meal_type in MEAL_ORDER:
        items = [item for item in day_log.items if item.meal_type == meal_type]
        if items:
            grouped[meal_type] = items
    return grouped


def _total_for(totals: NutrientTotals, nutrient: NutrientDefinition) -> float:
    return getattr(totals, nutrient.key)


def _target_for(targets: Targets, nutrient: NutrientDefinition) -> float:
    return float(getattr(targets, nutrient.key))
