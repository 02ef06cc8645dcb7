"""Response payload builders."""

from macro_tracker.domain.achievements import AchievementDefinition, AchievementStatus
from macro_tracker.domain.logs import DayLog, FoodLogEntry
from macro_tracker.domain.profile import Profile
from macro_tracker.domain.progress import DailyProgress, NutrientProgress
from macro_tracker.domain.vision import FoodEstimate
from macro_tracker.services.aggregation import aggregate_day, total_water
from macro_tracker.services.tracker import LogResult


def profile_payload(profile: Profile) -> dict[str, object]:
    targets = profile.targets
    preferences = profile.preferences
    return {
        "name": profile.name,
        "age": profile.age,
        "sex": profile.sex.value,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "goal": profile.goal.value,
        "activity_level": profile.activity_level.value,
        "timezone": profile.timezone,
        "has_onboarded": profile.has_onboarded,
        "is_premium": profile.is_premium,
        "targets": {
            "calories": targets.calories,
            "protein": targets.protein,
            "carbs": targets.carbs,
            "fat": targets.fat,
            "fiber": targets.fiber,
            "sugar": targets.sugar,
            "sodium": targets.sodium,
            "cholesterol": targets.cholesterol,
        },
        "preferences": {
            "dark_mode": preferences.dark_mode,
            "notifications": preferences.notifications,
            "weekly_reports": preferences.weekly_reports,
            "health_sync": preferences.health_sync,
            "unlocked_awards": list(preferences.unlocked_awards),
        },
    }


def entry_payload(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "date": entry.day,
        "timestamp": entry.timestamp,
        "meal_type": entry.meal_type.value,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "fiber": entry.fiber,
        "sugar": entry.sugar,
        "sodium": entry.sodium,
        "cholesterol": entry.cholesterol,
        "image_url": entry.image_url,
        "confidence": entry.confidence,
    }


def day_log_payload(day_log: DayLog) -> dict[str, object]:
    totals = aggregate_day(day_log)
    return {
        "date": day_log.day,
        "items": [entry_payload(entry) for entry in day_log.items],
        "water_intake": total_water(day_log.water, day_log.day),
        "totals": {
            "calories": totals.calories,
            "protein": totals.protein,
            "carbs": totals.carbs,
            "fat": totals.fat,
            "fiber": totals.fiber,
            "sugar": totals.sugar,
            "sodium": totals.sodium,
            "cholesterol": totals.cholesterol,
        },
    }


def achievement_payload(achievement: AchievementDefinition) -> dict[str, object]:
    return {
        "id": achievement.id,
        "title": achievement.title,
        "description": achievement.description,
        "icon": achievement.icon,
    }


def achievement_status_payload(status: AchievementStatus) -> dict[str, object]:
    payload = achievement_payload(status.definition)
    payload["unlocked"] = status.unlocked
    return payload


def log_result_payload(result: LogResult) -> dict[str, object]:
    celebration = result.celebration
    return {
        "log": day_log_payload(result.day_log),
        "unlocked": [achievement_payload(item) for item in result.unlocked],
        "celebration": achievement_payload(celebration) if celebration else None,
    }


def nutrient_progress_payload(item: NutrientProgress) -> dict[str, object]:
    progress = item.progress
    return {
        "key": item.nutrient.key,
        "label": item.nutrient.label,
        "unit": progress.unit,
        "kind": progress.kind.value,
        "current": progress.current,
        "maximum": progress.maximum,
        "percentage": progress.percentage,
        "raw_percentage": progress.raw_percentage,
        "remaining": progress.remaining,
        "is_over": progress.is_over,
        "status_label": progress.status_label,
    }


def progress_payload(progress: DailyProgress) -> dict[str, object]:
    return {
        "date": progress.day,
        "calories": nutrient_progress_payload(progress.calories),
        "macros": [nutrient_progress_payload(item) for item in progress.macros],
        "target_nutrients": [
            nutrient_progress_payload(item) for item in progress.target_nutrients
        ],
        "limit_nutrients": [
            nutrient_progress_payload(item) for item in progress.limit_nutrients
        ],
        "water": nutrient_progress_payload(progress.water),
        "meals": {
            meal_type.value: [entry_payload(entry) for entry in entries]
            for meal_type, entries in progress.meals.items()
        },
    }


def estimate_payload(estimate: FoodEstimate) -> dict[str, object]:
    return estimate.model_dump()
