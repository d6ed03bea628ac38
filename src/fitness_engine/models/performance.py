"""Performance observations: race results and logged training runs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from fitness_engine.exceptions import InvalidInput
from fitness_engine.models.enums import MAX_RUN_DISTANCE_MILES


@dataclass(frozen=True)
class RaceResult:
    """A single all-out effort over a known distance.

    Construction never fails; call validate() (or pass the result to
    vdot_from_race) to reject non-positive fields.
    """

    distance_miles: float
    time_seconds: float

    def validate(self) -> None:
        """Raise InvalidInput if distance or time is not strictly positive."""
        # NaN fails every comparison, so check positivity rather than <= 0
        if not (self.distance_miles > 0 and self.time_seconds > 0):
            raise InvalidInput(
                f"Race distance and time must be positive, got "
                f"distance={self.distance_miles} mi, time={self.time_seconds} s",
                distance_miles=self.distance_miles,
                time_seconds=self.time_seconds,
            )

    @property
    def pace_s_per_mile(self) -> float:
        """Average pace in seconds per mile. Validates first."""
        self.validate()
        return self.time_seconds / self.distance_miles


@dataclass(frozen=True)
class TrainingRun:
    """A logged training run as reported by the athlete.

    Fields come from a noisy extraction pipeline: duration may be missing
    and effort is an optional 1-10 self rating.
    """

    distance_miles: float
    duration_seconds: float | None
    run_date: date
    perceived_effort: int | None = None

    @property
    def is_usable(self) -> bool:
        """True when the run is plausible enough to estimate fitness from."""
        if self.duration_seconds is None:
            return False
        if not (math.isfinite(self.distance_miles) and math.isfinite(self.duration_seconds)):
            return False
        return (
            self.distance_miles > 0
            and self.duration_seconds > 0
            and self.distance_miles <= MAX_RUN_DISTANCE_MILES
        )

    def as_race(self) -> RaceResult:
        """View the run as a race effort over the same distance and time.

        Raises:
            InvalidInput: If the run has no duration.
        """
        if self.duration_seconds is None:
            raise InvalidInput(
                f"Run on {self.run_date} has no duration",
                distance_miles=self.distance_miles,
            )
        return RaceResult(distance_miles=self.distance_miles, time_seconds=self.duration_seconds)

    def days_before(self, as_of: date) -> int:
        """Whole days between the run and `as_of` (negative if in the future)."""
        return (as_of - self.run_date).days
