"""Daily calorie and macro target calculation.

Uses the Mifflin-St Jeor equation collapsed to two branches (male and
everyone else), scaled by a fixed activity factor and shifted by the goal.
The macro split is fixed regardless of goal.
"""

from dataclasses import replace

from macro_tracker.domain.errors import ProfileValidationError
from macro_tracker.domain.nutrients import round_half_up
from macro_tracker.domain.profile import ActivityLevel, Goal, Profile, Sex, Targets

ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
}

GOAL_ADJUSTMENTS: dict[Goal, int] = {
    Goal.LOSE_WEIGHT: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN_MUSCLE: 300,
}

PROTEIN_SHARE = 0.30
CARBS_SHARE = 0.40
FAT_SHARE = 0.30
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9


def basal_metabolic_rate(profile: Profile) -> float:
    """Return the basal metabolic rate in kcal/day."""
    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.sex == Sex.MALE:
        return bmr + 5
    return bmr - 161


def compute_targets(profile: Profile) -> Targets:
    """Derive calorie and macro targets; micronutrient targets carry over."""
    validate_body_stats(profile)
    tdee = basal_metabolic_rate(profile) * ACTIVITY_FACTORS[profile.activity_level]
    calories = round_half_up(tdee + GOAL_ADJUSTMENTS[profile.goal])
    return replace(
        profile.targets,
        calories=calories,
        protein=round_half_up(calories * PROTEIN_SHARE / KCAL_PER_GRAM_PROTEIN),
        carbs=round_half_up(calories * CARBS_SHARE / KCAL_PER_GRAM_CARBS),
        fat=round_half_up(calories * FAT_SHARE / KCAL_PER_GRAM_FAT),
    )


def apply_targets(profile: Profile) -> Profile:
    """Return a copy of the profile with freshly computed targets."""
    return replace(profile, targets=compute_targets(profile))


def validate_body_stats(profile: Profile) -> None:
    """Reject body stats that would produce non-physical targets."""
    if profile.age <= 0:
        raise ProfileValidationError("Age must be greater than zero")
    if profile.height_cm <= 0:
        raise ProfileValidationError("Height must be greater than zero")
    if profile.weight_kg <= 0:
        raise ProfileValidationError("Weight must be greater than zero")
