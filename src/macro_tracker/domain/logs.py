"""Domain models for food and water logging."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """Meal slot assigned from the capture hour."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


MEAL_ORDER = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER, MealType.SNACK)


@dataclass(frozen=True)
class FoodDraft:
    """Reviewed food data confirmed by the user but not yet logged."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    cholesterol: float | None = None
    image_url: str | None = None
    confidence: int | None = None
    timestamp: int | None = None


@dataclass(frozen=True)
class FoodLogEntry:
    """Logged food item; timestamp is epoch milliseconds."""

    id: UUID
    name: str
    day: str
    timestamp: int
    meal_type: MealType
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    cholesterol: float | None = None
    image_url: str | None = None
    confidence: int | None = None

    def nutrient(self, key: str) -> float:
        """Return a nutrient amount, treating a missing value as zero."""
        value = getattr(self, key)
        return float(value or 0.0)


@dataclass(frozen=True)
class WaterEntry:
    """A single water increment in milliliters."""

    amount_ml: int
    day: str
    timestamp: int
    id: UUID | None = None


@dataclass(frozen=True)
class DayLog:
    """Food and water entries for one local calendar date."""

    day: str
    items: tuple[FoodLogEntry, ...] = ()
    water: tuple[WaterEntry, ...] = ()
