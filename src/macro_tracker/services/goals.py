"""Comparison of running totals against targets and limits."""

from macro_tracker.domain.nutrients import NutrientKind, round_half_up
from macro_tracker.domain.progress import GoalProgress


def compare(
    current: float, maximum: float, kind: NutrientKind, unit: str = "g"
) -> GoalProgress:
    """Compare a running total against its goal.

    ``percentage`` is clamped to 0-100 for bar widths, while ``raw_percentage``
    keeps the unclamped ratio. A non-positive maximum reports 0%.

    Exceeding a target is informational only; ``is_over`` is set for limits.
    Being exactly at a limit still reads as "0<unit> left".
    """
    remaining = maximum - current
    if maximum > 0:
        ratio = current / maximum * 100
        percentage = min(100.0, max(0.0, ratio))
        raw_percentage = round_half_up(ratio)
    else:
        percentage = 0.0
        raw_percentage = 0

    if kind == NutrientKind.LIMIT:
        is_over = current > maximum
        has_room = remaining >= 0
    else:
        is_over = False
        has_room = remaining > 0

    if has_room:
        status_label = f"{round_half_up(remaining)}{unit} left"
    else:
        status_label = f"{round_half_up(abs(remaining))}{unit} over"

    return GoalProgress(
        current=current,
        maximum=maximum,
        kind=kind,
        unit=unit,
        percentage=percentage,
        raw_percentage=raw_percentage,
        remaining=remaining,
        is_over=is_over,
        status_label=status_label,
    )
