"""Request models for the HTTP API."""

from dataclasses import replace
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from macro_tracker.domain.logs import FoodDraft
from macro_tracker.domain.navigation import NavigationEvent, NavigationGuards, ViewState
from macro_tracker.domain.profile import ActivityLevel, Goal, Profile, Sex


class PreferencesRequest(BaseModel):
    """Editable preference toggles."""

    dark_mode: bool = False
    notifications: bool = True
    weekly_reports: bool = False
    health_sync: bool = False


class ProfileRequest(BaseModel):
    """Body stats and goal submitted at onboarding or from the profile screen."""

    name: str = ""
    age: int = Field(gt=0)
    sex: Sex = Sex.MALE
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    goal: Goal = Goal.LOSE_WEIGHT
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    timezone: str = "UTC"
    preferences: PreferencesRequest | None = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    def apply_to(self, base: Profile) -> Profile:
        """Overlay the submitted fields on an existing profile."""
        preferences = base.preferences
        if self.preferences is not None:
            preferences = replace(preferences, **self.preferences.model_dump())
        return replace(
            base,
            name=self.name,
            age=self.age,
            sex=self.sex,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            goal=self.goal,
            activity_level=self.activity_level,
            timezone=self.timezone,
            preferences=preferences,
        )


class MicronutrientTargetsRequest(BaseModel):
    """Explicit edit of the fiber target and the three limits."""

    fiber: int = Field(ge=0)
    sugar: int = Field(ge=0)
    sodium: int = Field(ge=0)
    cholesterol: int = Field(ge=0)


class FoodEntryRequest(BaseModel):
    """A reviewed food confirmed for logging."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    cholesterol: float | None = Field(default=None, ge=0)
    image_url: str | None = None
    confidence: int | None = Field(default=None, ge=0, le=100)
    timestamp: int | None = Field(default=None, ge=0)

    def to_draft(self) -> FoodDraft:
        """Convert to the domain draft."""
        return FoodDraft(**self.model_dump())


class WaterRequest(BaseModel):
    """A water increment in milliliters."""

    amount_ml: int


class AnalyzeRequest(BaseModel):
    """A base64 encoded photo, optionally as a data URL."""

    image_base64: str = Field(min_length=1)


class NavigationRequest(BaseModel):
    """A navigation event raised on the current view."""

    state: ViewState
    event: NavigationEvent
    has_onboarded: bool = False
    is_premium: bool = False

    def guards(self) -> NavigationGuards:
        """Return the guard flags for the transition."""
        return NavigationGuards(
            has_onboarded=self.has_onboarded, is_premium=self.is_premium
        )
