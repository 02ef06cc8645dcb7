"""Pure mutations over a day log."""

from dataclasses import replace
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from macro_tracker.domain.errors import LogDateMismatchError
from macro_tracker.domain.logs import DayLog, FoodLogEntry, MealType, WaterEntry

BREAKFAST_START_HOUR = 5
LUNCH_START_HOUR = 11
DINNER_START_HOUR = 16
SNACK_START_HOUR = 22


def meal_type_for_hour(hour: int) -> MealType:
    """Classify an hour of day into a meal slot."""
    if BREAKFAST_START_HOUR <= hour < LUNCH_START_HOUR:
        return MealType.BREAKFAST
    if LUNCH_START_HOUR <= hour < DINNER_START_HOUR:
        return MealType.LUNCH
    if DINNER_START_HOUR <= hour < SNACK_START_HOUR:
        return MealType.DINNER
    return MealType.SNACK


def local_time(timestamp_ms: int, timezone_name: str) -> datetime:
    """Convert epoch milliseconds into an aware local datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).astimezone(
        ZoneInfo(timezone_name)
    )


def local_hour(timestamp_ms: int, timezone_name: str) -> int:
    """Return the local hour of day for a capture timestamp."""
    return local_time(timestamp_ms, timezone_name).hour


def local_day(timestamp_ms: int, timezone_name: str) -> str:
    """Return the local calendar date string for a timestamp."""
    return local_time(timestamp_ms, timezone_name).date().isoformat()


def meal_type_for(timestamp_ms: int, timezone_name: str) -> MealType:
    """Classify a capture timestamp into a meal slot."""
    return meal_type_for_hour(local_hour(timestamp_ms, timezone_name))


def add_food_entry(log: DayLog, entry: FoodLogEntry) -> DayLog:
    """Return a new log with the entry placed first."""
    if entry.day != log.day:
        raise LogDateMismatchError(
            f"Entry dated {entry.day} cannot be added to the log for {log.day}"
        )
    return replace(log, items=(entry, *log.items))


def add_water(log: DayLog, amount_ml: int, timestamp_ms: int) -> DayLog:
    """Return a new log with one more water increment.

    Non-positive amounts leave the log unchanged.
    """
    if amount_ml <= 0:
        return log
    entry = WaterEntry(amount_ml=amount_ml, day=log.day, timestamp=timestamp_ms)
    return replace(log, water=(*log.water, entry))
