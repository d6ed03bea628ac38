"""FitnessEngine: chains estimation, pace derivation and prediction."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from fitness_engine.math.estimator import vdot_from_history, vdot_from_race
from fitness_engine.math.paces import derive_paces
from fitness_engine.math.predictor import equivalent_times, predict_time
from fitness_engine.math.projection import suggest_target
from fitness_engine.math.reference_table import VDOT_REFERENCE_TABLE, ReferenceEntry
from fitness_engine.models.enums import DEFAULT_PROJECTION_WEEKS, ExperienceTier
from fitness_engine.models.paces import EquivalentTimes, PaceSet
from fitness_engine.models.performance import RaceResult, TrainingRun

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitnessProfile:
    """Snapshot of an athlete's estimated fitness.

    Attributes:
        vdot: Estimated VDOT.
        paces: Training paces for that VDOT.
        equivalent_times: Predicted race times for that VDOT.
        source: "race", "history", or "default" (no usable runs).
        runs_used: Number of training runs that passed filtering.
    """

    vdot: int
    paces: PaceSet
    equivalent_times: EquivalentTimes
    source: str
    runs_used: int = 0


class FitnessEngine:
    """Holds a reference table and produces FitnessProfiles from it.

    Usage:
        engine = FitnessEngine()
        profile = engine.profile_from_history(runs)
        target = engine.target(profile, ExperienceTier.BEGINNER)
    """

    def __init__(self, table: tuple[ReferenceEntry, ...] = VDOT_REFERENCE_TABLE) -> None:
        if len(table) < 2:
            raise ValueError(f"Reference table needs at least 2 entries, got {len(table)}")
        if any(a.vdot >= b.vdot for a, b in zip(table, table[1:])):
            raise ValueError("Reference table must be ordered by strictly increasing VDOT")
        self.table = table

    def profile_for_vdot(self, vdot: int, source: str, runs_used: int = 0) -> FitnessProfile:
        return FitnessProfile(
            vdot=vdot,
            paces=derive_paces(vdot, self.table),
            equivalent_times=equivalent_times(vdot, self.table),
            source=source,
            runs_used=runs_used,
        )

    def profile_from_race(self, race: RaceResult) -> FitnessProfile:
        """Build a profile from one race. Raises InvalidInput on bad data."""
        vdot = vdot_from_race(race, self.table)
        logger.info(
            "Estimated VDOT %d from %.2f mi in %.0f s",
            vdot,
            race.distance_miles,
            race.time_seconds,
        )
        return self.profile_for_vdot(vdot, source="race")

    def profile_from_history(
        self,
        runs: Iterable[TrainingRun],
        as_of: date | None = None,
    ) -> FitnessProfile:
        """Build a profile from a training history, falling back to the default VDOT."""
        runs = list(runs)
        runs_used = sum(1 for r in runs if r.is_usable)
        vdot = vdot_from_history(runs, as_of=as_of, table=self.table)
        source = "history" if runs_used else "default"
        logger.info("Estimated VDOT %d from %d/%d runs", vdot, runs_used, len(runs))
        return self.profile_for_vdot(vdot, source=source, runs_used=runs_used)

    def predict(self, vdot: int, distance_miles: float) -> int:
        return predict_time(vdot, distance_miles, self.table)

    def target(
        self,
        current: FitnessProfile | int,
        tier: ExperienceTier,
        weeks: int = DEFAULT_PROJECTION_WEEKS,
    ) -> int:
        """Suggest a target VDOT for a profile or a bare VDOT."""
        vdot = current.vdot if isinstance(current, FitnessProfile) else current
        return suggest_target(vdot, tier, weeks)
