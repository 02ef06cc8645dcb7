"""Supabase repository for food log entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.logs import FoodLogEntry, MealType
from macro_tracker.services.tracker import FoodLogRepository

_COLUMNS = (
    "id, date, meal_type, name, calories, protein, carbs, fat, fiber, sugar, "
    "sodium, cholesterol, confidence, image_url, created_at"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def list_entries(self, user_id: UUID, day: str) -> list[FoodLogEntry]:
        """Return a user's entries for a date, newest first."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, user_id: UUID, entry: FoodLogEntry) -> None:
        """Insert a food entry row."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "id": str(entry.id),
                    "user_id": str(user_id),
                    "date": entry.day,
                    "meal_type": entry.meal_type.value,
                    "name": entry.name,
                    "calories": entry.calories,
                    "protein": entry.protein,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "fiber": entry.fiber,
                    "sugar": entry.sugar,
                    "sodium": entry.sodium,
                    "cholesterol": entry.cholesterol,
                    "confidence": entry.confidence,
                    "image_url": entry.image_url,
                    "created_at": _to_iso(entry.timestamp),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log entry")


def _to_iso(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).isoformat()


def _to_ms(value: str) -> int:
    return int(datetime.fromisoformat(value).timestamp() * 1000)


def _optional_float(value: object) -> float | None:
    return float(value) if isinstance(value, int | float) else None


def _parse_entry(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        day=str(row["date"]),
        timestamp=_to_ms(str(row["created_at"])),
        meal_type=MealType(row.get("meal_type") or MealType.SNACK.value),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        fiber=_optional_float(row.get("fiber")),
        sugar=_optional_float(row.get("sugar")),
        sodium=_optional_float(row.get("sodium")),
        cholesterol=_optional_float(row.get("cholesterol")),
        image_url=row.get("image_url"),
        confidence=row.get("confidence"),
    )
