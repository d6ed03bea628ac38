"""VDOT estimation from a single race or a history of training runs.

A race is matched to the nearest reference anchor by average pace. A
training history is reduced to one VDOT by a weighted mean of per-run
estimates, where recent and harder efforts count for more.

Reference:
    Daniels (2014). Daniels' Running Formula, 3rd ed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

import numpy as np

from fitness_engine.exceptions import InvalidInput
from fitness_engine.math.reference_table import (
    VDOT_REFERENCE_TABLE,
    ReferenceEntry,
    category_for_distance,
    nearest_entry,
)
from fitness_engine.math.rounding import clamp_vdot, round_half_up
from fitness_engine.models.enums import (
    DEFAULT_EFFORT_WEIGHT,
    DEFAULT_VDOT,
    RECENCY_WEIGHT_FLOOR,
    RECENCY_WINDOW_DAYS,
)
from fitness_engine.models.performance import RaceResult, TrainingRun

logger = logging.getLogger(__name__)


def vdot_from_race(
    race: RaceResult,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> int:
    """Estimate VDOT from a race result.

    Args:
        race: Distance (miles) and finishing time (seconds).
        table: Reference anchors to match against.

    Returns:
        VDOT of the anchor closest in pace, clamped to [VDOT_MIN, VDOT_MAX].

    Raises:
        InvalidInput: If distance or time is non-positive.
    """
    pace = race.pace_s_per_mile
    category = category_for_distance(race.distance_miles)
    entry = nearest_entry(pace, category, table)
    return int(clamp_vdot(entry.vdot))


def recency_weight(days_since_run: int) -> float:
    """Linear decay over RECENCY_WINDOW_DAYS, floored at RECENCY_WEIGHT_FLOOR.

    A run dated after `as_of` (negative days) weighs more than 1.0.
    """
    return max(RECENCY_WEIGHT_FLOOR, 1.0 - days_since_run / RECENCY_WINDOW_DAYS)


def effort_weight(perceived_effort: int | None) -> float:
    """Scale a run's influence by its effort rating: rating / 10, or 0.8 if unrated.

    The rating is used as given; 0 counts as unrated.
    """
    if not perceived_effort:
        return DEFAULT_EFFORT_WEIGHT
    return perceived_effort / 10.0


def vdot_from_history(
    runs: Iterable[TrainingRun],
    as_of: date | None = None,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> int:
    """Estimate current VDOT from recent training runs.

    Implausible runs (no duration, non-positive values, longer than a
    marathon) are dropped. Each remaining run is scored as if it were a race,
    then weighted by recency_weight * effort_weight.

    Args:
        runs: Training runs, typically the last few weeks for one athlete.
        as_of: Date the recency weights are measured from (default: today).
        table: Reference anchors to match against.

    Returns:
        Weighted-mean VDOT rounded to an integer and clamped, or
        DEFAULT_VDOT when no usable run remains.
    """
    if as_of is None:
        as_of = date.today()

    vdots: list[int] = []
    weights: list[float] = []
    skipped = 0
    for run in runs:
        if not run.is_usable:
            skipped += 1
            continue
        try:
            vdot = vdot_from_race(run.as_race(), table)
        except InvalidInput:
            logger.debug("Skipping run on %s: invalid race data", run.run_date)
            skipped += 1
            continue
        vdots.append(vdot)
        weights.append(recency_weight(run.days_before(as_of)) * effort_weight(run.perceived_effort))

    if skipped:
        logger.debug("Excluded %d implausible runs from VDOT estimate", skipped)

    if not vdots:
        logger.debug("No usable runs, falling back to default VDOT %d", DEFAULT_VDOT)
        return DEFAULT_VDOT

    weights_arr = np.array(weights, dtype=np.float64)
    total_weight = float(np.sum(weights_arr))
    if total_weight <= 0:
        return DEFAULT_VDOT

    weighted = float(np.dot(np.array(vdots, dtype=np.float64), weights_arr)) / total_weight
    return int(clamp_vdot(round_half_up(weighted)))
