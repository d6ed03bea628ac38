"""Target VDOT projection over a training block.

The weekly improvement caps in IMPROVEMENT_RATE_PER_WEEK encode a coaching
policy (gains slow down with experience). They are tunable heuristics, not
a physiological law.
"""

from __future__ import annotations

from fitness_engine.math.rounding import clamp_vdot, round_half_up
from fitness_engine.models.enums import (
    DEFAULT_PROJECTION_WEEKS,
    IMPROVEMENT_RATE_PER_WEEK,
    VDOT_MAX,
    ExperienceTier,
)


def suggest_target(
    current_vdot: float,
    tier: ExperienceTier,
    weeks: int = DEFAULT_PROJECTION_WEEKS,
) -> int:
    """Suggest the highest plausible VDOT reachable in `weeks`.

    Args:
        current_vdot: Current fitness; clamped to [VDOT_MIN, VDOT_MAX].
        tier: Experience tier selecting the weekly improvement rate.
        weeks: Length of the training block in weeks.

    Returns:
        Target VDOT, never below the clamped current VDOT and never above
        VDOT_MAX.

    Raises:
        ValueError: If weeks is negative.
    """
    if weeks < 0:
        raise ValueError(f"weeks must be non-negative, got {weeks}")
    current = clamp_vdot(current_vdot)
    target = current + IMPROVEMENT_RATE_PER_WEEK[tier] * weeks
    return min(VDOT_MAX, round_half_up(target))
