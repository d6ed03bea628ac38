"""Derived pace and race-time snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from fitness_engine.models.enums import TrainingZone


@dataclass(frozen=True)
class PaceSet:
    """Five training paces in seconds per mile.

    Always derived from a VDOT (see math.paces.derive_paces). Faster zones
    have numerically smaller paces:
    repetition < interval < threshold < marathon < easy.
    """

    easy: float
    marathon: float
    threshold: float
    interval: float
    repetition: float

    def for_zone(self, zone: TrainingZone) -> float:
        """Return the pace for a named training zone."""
        return {
            TrainingZone.EASY: self.easy,
            TrainingZone.MARATHON: self.marathon,
            TrainingZone.THRESHOLD: self.threshold,
            TrainingZone.INTERVAL: self.interval,
            TrainingZone.REPETITION: self.repetition,
        }[zone]

    def as_dict(self) -> dict[str, float]:
        return {
            "easy": self.easy,
            "marathon": self.marathon,
            "threshold": self.threshold,
            "interval": self.interval,
            "repetition": self.repetition,
        }


@dataclass(frozen=True)
class EquivalentTimes:
    """Predicted finishing times in seconds at the standard race distances."""

    mile: float
    five_k: float
    ten_k: float
    half_marathon: float
    marathon: float

    def as_dict(self) -> dict[str, float]:
        return {
            "mile": self.mile,
            "five_k": self.five_k,
            "ten_k": self.ten_k,
            "half_marathon": self.half_marathon,
            "marathon": self.marathon,
        }
