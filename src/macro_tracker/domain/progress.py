"""Domain models for progress against daily targets."""

from dataclasses import dataclass

from macro_tracker.domain.logs import FoodLogEntry, MealType
from macro_tracker.domain.nutrients import NutrientDefinition, NutrientKind


@dataclass(frozen=True)
class GoalProgress:
    """Comparison of a current amount against its goal."""

    current: float
    maximum: float
    kind: NutrientKind
    unit: str
    percentage: float
    raw_percentage: int
    remaining: float
    is_over: bool
    status_label: str


@dataclass(frozen=True)
class NutrientProgress:
    """Goal progress for a named nutrient."""

    nutrient: NutrientDefinition
    progress: GoalProgress


@dataclass(frozen=True)
class DailyProgress:
    """Everything the dashboards show for one day."""

    day: str
    calories: NutrientProgress
    macros: list[NutrientProgress]
    target_nutrients: list[NutrientProgress]
    limit_nutrients: list[NutrientProgress]
    water: NutrientProgress
    meals: dict[MealType, list[FoodLogEntry]]
