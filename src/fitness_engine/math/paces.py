"""Training pace derivation from VDOT.

Every zone is a fixed multiple of the anchor mile pace:
    easy 125%, marathon 112%, threshold 108%, interval 98%, repetition 92%.
"""

from __future__ import annotations

from fitness_engine.math.reference_table import (
    VDOT_REFERENCE_TABLE,
    ReferenceEntry,
    first_entry_at_or_above,
)
from fitness_engine.math.rounding import clamp_vdot, round_half_up
from fitness_engine.models.enums import PACE_MULTIPLIERS, TrainingZone
from fitness_engine.models.paces import PaceSet


def derive_paces(
    vdot: float,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> PaceSet:
    """Calculate the five training paces for a VDOT.

    Args:
        vdot: Fitness value; clamped to [VDOT_MIN, VDOT_MAX] first.
        table: Reference anchors.

    Returns:
        PaceSet in whole seconds per mile.
    """
    entry = first_entry_at_or_above(clamp_vdot(vdot), table)
    mile_pace = entry.mile_pace_s

    def _pace(zone: TrainingZone) -> int:
        return round_half_up(mile_pace * PACE_MULTIPLIERS[zone])

    return PaceSet(
        easy=_pace(TrainingZone.EASY),
        marathon=_pace(TrainingZone.MARATHON),
        threshold=_pace(TrainingZone.THRESHOLD),
        interval=_pace(TrainingZone.INTERVAL),
        repetition=_pace(TrainingZone.REPETITION),
    )
