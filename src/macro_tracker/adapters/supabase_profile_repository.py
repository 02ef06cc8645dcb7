"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.profile import (
    ActivityLevel,
    Goal,
    Preferences,
    Profile,
    Sex,
    Targets,
)
from macro_tracker.services.profiles import ProfileRepository

# JSON keys inside the ``targets`` column.
_TARGET_KEYS = {
    "calories": "targetCalories",
    "protein": "targetProtein",
    "carbs": "targetCarbs",
    "fat": "targetFat",
    "fiber": "targetFiber",
    "sugar": "targetSugar",
    "sodium": "maxSodium",
    "cholesterol": "maxCholesterol",
}

# JSON keys inside the ``preferences`` column.
_PREFERENCE_KEYS = {
    "dark_mode": "darkMode",
    "notifications": "notifications",
    "weekly_reports": "weeklyReports",
    "health_sync": "healthSync",
}


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select(
                "id, name, age, gender, height, weight, goal, activity_level, "
                "has_onboarded, is_premium, timezone, targets, preferences"
            )
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _profile_from_row(response.data[0])

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Create or replace the profile row."""
        payload = _profile_to_row(profile)
        payload["id"] = str(user_id)
        payload["has_onboarded"] = profile.has_onboarded
        payload["is_premium"] = profile.is_premium
        response = self.client.table("profiles").upsert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to upsert profile")

    def update_profile(self, user_id: UUID, profile: Profile) -> None:
        """Update body stats, preferences and targets."""
        payload = _profile_to_row(profile)
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        self.client.table("profiles").update(payload).eq("id", str(user_id)).execute()

    def update_preferences(self, user_id: UUID, preferences: Preferences) -> None:
        """Update only the preferences JSON column."""
        self.client.table("profiles").update(
            {
                "preferences": _preferences_to_json(preferences),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("id", str(user_id)).execute()

    def set_premium(self, user_id: UUID, is_premium: bool) -> None:
        """Update the premium flag."""
        self.client.table("profiles").update({"is_premium": is_premium}).eq(
            "id", str(user_id)
        ).execute()


def _preferences_to_json(preferences: Preferences) -> dict[str, object]:
    stored: dict[str, object] = {
        column: getattr(preferences, attribute)
        for attribute, column in _PREFERENCE_KEYS.items()
    }
    stored["unlockedAwards"] = list(preferences.unlocked_awards)
    return stored


def _profile_to_row(profile: Profile) -> dict[str, object]:
    return {
        "name": profile.name,
        "age": profile.age,
        "gender": profile.sex.value,
        "height": profile.height_cm,
        "weight": profile.weight_kg,
        "goal": profile.goal.value,
        "activity_level": profile.activity_level.value,
        "timezone": profile.timezone,
        "targets": {
            column: getattr(profile.targets, attribute)
            for attribute, column in _TARGET_KEYS.items()
        },
        "preferences": _preferences_to_json(profile.preferences),
    }


def _profile_from_row(row: dict[str, object]) -> Profile:
    defaults = Profile()
    stored_targets = row.get("targets") or {}
    stored_preferences = row.get("preferences") or {}
    targets = Targets(
        **{
            attribute: int(stored_targets.get(column, getattr(defaults.targets, attribute)))
            for attribute, column in _TARGET_KEYS.items()
        }
    )
    preferences = Preferences(
        **{
            attribute: bool(
                stored_preferences.get(column, getattr(defaults.preferences, attribute))
            )
            for attribute, column in _PREFERENCE_KEYS.items()
        },
        unlocked_awards=tuple(stored_preferences.get("unlockedAwards") or ()),
    )
    return Profile(
        name=str(row.get("name") or ""),
        age=int(row.get("age") or defaults.age),
        sex=Sex(row.get("gender") or defaults.sex.value),
        height_cm=float(row.get("height") or defaults.height_cm),
        weight_kg=float(row.get("weight") or defaults.weight_kg),
        goal=Goal(row.get("goal") or defaults.goal.value),
        activity_level=ActivityLevel(
            row.get("activity_level") or defaults.activity_level.value
        ),
        targets=targets,
        has_onboarded=bool(row.get("has_onboarded", False)),
        is_premium=bool(row.get("is_premium", False)),
        timezone=str(row.get("timezone") or defaults.timezone),
        preferences=preferences,
    )
