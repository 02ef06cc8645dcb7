"""Nutrient definitions shared by aggregation and goal tracking."""

import math
from dataclasses import dataclass
from enum import Enum


class NutrientKind(Enum):
    """Whether more is better (target) or less is better (limit)."""

    TARGET = "target"
    LIMIT = "limit"


@dataclass(frozen=True)
class NutrientDefinition:
    """A tracked nutrient with its display unit and goal semantics."""

    key: str
    label: str
    unit: str
    kind: NutrientKind


@dataclass(frozen=True)
class NutrientTotals:
    """Per-nutrient sums for a single day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    cholesterol: float = 0.0


FOOD_NUTRIENT_KEYS = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "cholesterol",
)

CALORIES = NutrientDefinition("calories", "Calories", "kcal", NutrientKind.TARGET)
PROTEIN = NutrientDefinition("protein", "Protein", "g", NutrientKind.TARGET)
CARBS = NutrientDefinition("carbs", "Carbs", "g", NutrientKind.TARGET)
FAT = NutrientDefinition("fat", "Fat", "g", NutrientKind.TARGET)
FIBER = NutrientDefinition("fiber", "Fiber", "g", NutrientKind.TARGET)
SUGAR = NutrientDefinition("sugar", "Added Sugars", "g", NutrientKind.LIMIT)
SODIUM = NutrientDefinition("sodium", "Sodium", "mg", NutrientKind.LIMIT)
CHOLESTEROL = NutrientDefinition("cholesterol", "Cholesterol", "mg", NutrientKind.LIMIT)
FAT_LIMIT = NutrientDefinition("fat", "Fat", "g", NutrientKind.LIMIT)
WATER = NutrientDefinition("water", "Water", "ml", NutrientKind.TARGET)

WATER_GOAL_ML = 2500


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +infinity."""
    return math.floor(value + 0.5)
