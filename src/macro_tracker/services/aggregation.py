"""Daily nutrient aggregation."""

import math
from collections.abc import Iterable

from macro_tracker.domain.logs import DayLog, FoodLogEntry, WaterEntry
from macro_tracker.domain.nutrients import FOOD_NUTRIENT_KEYS, NutrientTotals


def aggregate(entries: Iterable[FoodLogEntry], day: str) -> NutrientTotals:
    """Sum every nutrient over the entries logged on ``day``."""
    matching = [entry for entry in entries if entry.day == day]
    # fsum is exactly rounded, so the result does not depend on entry order.
    sums = {
        key: math.fsum(entry.nutrient(key) for entry in matching)
        for key in FOOD_NUTRIENT_KEYS
    }
    return NutrientTotals(**sums)


def total_water(entries: Iterable[WaterEntry], day: str) -> int:
    """Sum water increments logged on ``day`` in milliliters."""
    return sum(entry.amount_ml for entry in entries if entry.day == day)


def aggregate_day(day_log: DayLog) -> NutrientTotals:
    """Aggregate the food items of a day log."""
    return aggregate(day_log.items, day_log.day)
