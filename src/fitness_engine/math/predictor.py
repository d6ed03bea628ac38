"""Race time prediction from VDOT.

A race is assumed to be held at one training pace chosen by distance band:
repetition up to 1.5 mi, interval up to 5 mi, threshold up to 15 mi and
marathon pace beyond.
"""

from __future__ import annotations

from fitness_engine.math.paces import derive_paces
from fitness_engine.math.reference_table import VDOT_REFERENCE_TABLE, ReferenceEntry
from fitness_engine.math.rounding import round_half_up
from fitness_engine.models.enums import (
    FIVE_K_MILES,
    HALF_MARATHON_MILES,
    LONG_RACE_ZONE,
    MARATHON_MILES,
    MILE_MILES,
    PREDICTION_BANDS,
    TEN_K_MILES,
)
from fitness_engine.models.paces import EquivalentTimes, PaceSet


def pace_for_distance(paces: PaceSet, distance_miles: float) -> float:
    """Select the pace (s/mile) a race of this distance is predicted at."""
    for upper_miles, zone in PREDICTION_BANDS:
        if distance_miles <= upper_miles:
            return paces.for_zone(zone)
    return paces.for_zone(LONG_RACE_ZONE)


def predict_time(
    vdot: float,
    distance_miles: float,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> int:
    """Predict a finishing time in whole seconds.

    Args:
        vdot: Fitness value (clamped by derive_paces).
        distance_miles: Race distance; callers must pass a positive value.
        table: Reference anchors.

    Returns:
        Predicted time in seconds.
    """
    pace = pace_for_distance(derive_paces(vdot, table), distance_miles)
    return round_half_up(distance_miles * pace)


def equivalent_times(
    vdot: float,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> EquivalentTimes:
    """Predict times for the mile, 5K, 10K, half marathon and marathon."""
    return EquivalentTimes(
        mile=predict_time(vdot, MILE_MILES, table),
        five_k=predict_time(vdot, FIVE_K_MILES, table),
        ten_k=predict_time(vdot, TEN_K_MILES, table),
        half_marathon=predict_time(vdot, HALF_MARATHON_MILES, table),
        marathon=predict_time(vdot, MARATHON_MILES, table),
    )
