"""VDOT reference table: anchor benchmarks relating VDOT to race performance.

Eleven sparse anchors (VDOT 30-80 in steps of 5). Lookups snap to an
anchor rather than interpolating, so derived paces move in visible steps
between adjacent anchors.

Reference:
    Daniels (2014). Daniels' Running Formula, 3rd ed. VDOT tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_engine.models.enums import (
    FIVE_K_CATEGORY_MAX_MILES,
    FIVE_K_MILES,
    MILE_CATEGORY_MAX_MILES,
    TEN_K_MILES,
    ReferenceCategory,
)


@dataclass(frozen=True)
class ReferenceEntry:
    """One anchor row: a VDOT and its mile pace, 5K time and 10K time (seconds)."""

    vdot: int
    mile_pace_s: float
    five_k_time_s: float
    ten_k_time_s: float

    def reference_pace(self, category: ReferenceCategory) -> float:
        """Per-mile pace for the given benchmark column."""
        if category is ReferenceCategory.MILE:
            return self.mile_pace_s
        if category is ReferenceCategory.FIVE_K:
            return self.five_k_time_s / FIVE_K_MILES
        return self.ten_k_time_s / TEN_K_MILES


def _mmss(minutes: int, seconds: int) -> int:
    return minutes * 60 + seconds


# Ordered by increasing VDOT
VDOT_REFERENCE_TABLE: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(30, _mmss(8, 20), _mmss(26, 6), _mmss(54, 15)),
    ReferenceEntry(35, _mmss(7, 7), _mmss(22, 14), _mmss(46, 16)),
    ReferenceEntry(40, _mmss(6, 12), _mmss(19, 23), _mmss(40, 25)),
    ReferenceEntry(45, _mmss(5, 27), _mmss(17, 5), _mmss(35, 40)),
    ReferenceEntry(50, _mmss(4, 52), _mmss(15, 18), _mmss(31, 56)),
    ReferenceEntry(55, _mmss(4, 23), _mmss(13, 49), _mmss(28, 51)),
    ReferenceEntry(60, _mmss(4, 0), _mmss(12, 33), _mmss(26, 13)),
    ReferenceEntry(65, _mmss(3, 40), _mmss(11, 26), _mmss(23, 55)),
    ReferenceEntry(70, _mmss(3, 24), _mmss(10, 29), _mmss(21, 56)),
    ReferenceEntry(75, _mmss(3, 9), _mmss(9, 38), _mmss(20, 10)),
    ReferenceEntry(80, _mmss(2, 57), _mmss(8, 52), _mmss(18, 35)),
)


def category_for_distance(distance_miles: float) -> ReferenceCategory:
    """Pick the benchmark column closest in character to a race distance.

    Args:
        distance_miles: Race distance in miles.

    Returns:
        MILE up to 1.2 mi, FIVE_K up to 3.5 mi, TEN_K beyond.
    """
    if distance_miles <= MILE_CATEGORY_MAX_MILES:
        return ReferenceCategory.MILE
    if distance_miles <= FIVE_K_CATEGORY_MAX_MILES:
        return ReferenceCategory.FIVE_K
    return ReferenceCategory.TEN_K


def nearest_entry(
    pace_s_per_mile: float,
    category: ReferenceCategory,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> ReferenceEntry:
    """Find the anchor whose reference pace is closest to an observed pace.

    Used for race estimation. On equal distance the lower-VDOT entry wins.

    Args:
        pace_s_per_mile: Observed average pace in seconds per mile.
        category: Benchmark column to compare against.
        table: Anchor table, ordered by increasing VDOT.

    Returns:
        The closest ReferenceEntry.
    """
    # min() keeps the first of equal keys
    return min(table, key=lambda e: abs(pace_s_per_mile - e.reference_pace(category)))


def first_entry_at_or_above(
    vdot: float,
    table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE,
) -> ReferenceEntry:
    """Find the lowest anchor whose VDOT is >= `vdot`.

    Used for pace derivation. Falls back to the highest anchor when `vdot`
    is above the top of the table. Deliberately not the same rule as
    nearest_entry: a VDOT of 46 maps to the 50 anchor here.

    Args:
        vdot: Fitness value to look up.
        table: Anchor table, ordered by increasing VDOT.

    Returns:
        The selected ReferenceEntry.
    """
    return next((e for e in table if e.vdot >= vdot), table[-1])
