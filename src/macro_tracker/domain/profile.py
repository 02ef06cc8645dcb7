"""Domain models for user profiles and their derived targets."""

from dataclasses import dataclass, field
from enum import Enum


class Sex(Enum):
    """Biological sex category used by the BMR formula."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Goal(Enum):
    """Weight goal driving the calorie adjustment."""

    LOSE_WEIGHT = "Lose Weight"
    MAINTAIN = "Maintain"
    GAIN_MUSCLE = "Gain Muscle"


class ActivityLevel(Enum):
    """Activity levels ordered from sedentary to very active."""

    SEDENTARY = "Sedentary"
    LIGHT = "Lightly Active"
    MODERATE = "Moderately Active"
    ACTIVE = "Very Active"


@dataclass(frozen=True)
class Targets:
    """Daily nutrition targets; sugar, sodium and cholesterol are limits."""

    calories: int = 2000
    protein: int = 150
    carbs: int = 200
    fat: int = 65
    fiber: int = 30
    sugar: int = 50
    sodium: int = 2300
    cholesterol: int = 300


@dataclass(frozen=True)
class Preferences:
    """User preference bag, including unlocked achievement ids."""

    dark_mode: bool = False
    notifications: bool = True
    weekly_reports: bool = False
    health_sync: bool = False
    unlocked_awards: tuple[str, ...] = ()


@dataclass(frozen=True)
class Profile:
    """Body stats, goal and derived targets for a user."""

    name: str = ""
    age: int = 25
    sex: Sex = Sex.MALE
    height_cm: float = 175.0
    weight_kg: float = 70.0
    goal: Goal = Goal.LOSE_WEIGHT
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    targets: Targets = field(default_factory=Targets)
    has_onboarded: bool = False
    is_premium: bool = False
    timezone: str = "UTC"
    preferences: Preferences = field(default_factory=Preferences)
