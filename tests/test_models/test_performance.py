"""Tests for RaceResult / TrainingRun value types."""

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from fitness_engine.exceptions import FitnessEngineError, InvalidInput
from fitness_engine.models.performance import RaceResult, TrainingRun


class TestRaceResult:
    def test_pace(self) -> None:
        assert RaceResult(3.1, 918).pace_s_per_mile == pytest.approx(296.13, abs=0.01)

    def test_validate_passes_for_positive_fields(self) -> None:
        RaceResult(1.0, 300).validate()

    def test_invalid_input_carries_fields(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            RaceResult(0, 1500).validate()
        assert exc_info.value.distance_miles == 0
        assert exc_info.value.time_seconds == 1500

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            RaceResult(float("nan"), 1500).validate()

    def test_pace_validates(self) -> None:
        with pytest.raises(InvalidInput):
            _ = RaceResult(5, 0).pace_s_per_mile

    def test_exception_hierarchy(self) -> None:
        assert issubclass(InvalidInput, FitnessEngineError)
        assert issubclass(InvalidInput, ValueError)

    def test_frozen(self) -> None:
        race = RaceResult(3.1, 1200)
        with pytest.raises(dataclasses.FrozenInstanceError):
            race.time_seconds = 1100  # type: ignore[misc]


class TestTrainingRun:
    def test_usable_run(self) -> None:
        assert TrainingRun(5.0, 2400, date(2026, 10, 1)).is_usable

    @pytest.mark.parametrize(
        ("distance", "duration"),
        [
            (5.0, None),
            (0.0, 1800),
            (-1.0, 1800),
            (5.0, 0),
            (5.0, -60),
            (26.3, 4 * 3600),
            (float("inf"), 3600),
        ],
    )
    def test_unusable_runs(self, distance: float, duration: float | None) -> None:
        assert not TrainingRun(distance, duration, date(2026, 10, 1)).is_usable

    def test_marathon_distance_is_usable(self) -> None:
        """26.2 mi is the longest run still accepted."""
        assert TrainingRun(26.2, 4 * 3600, date(2026, 10, 1)).is_usable

    def test_as_race(self) -> None:
        run = TrainingRun(6.2, 2400, date(2026, 10, 1), perceived_effort=9)
        assert run.as_race() == RaceResult(6.2, 2400)

    def test_as_race_without_duration_rejected(self) -> None:
        """A missing duration is not turned into a zero-second race."""
        run = TrainingRun(5.0, None, date(2026, 10, 1))
        with pytest.raises(InvalidInput) as exc_info:
            run.as_race()
        assert exc_info.value.distance_miles == 5.0
        assert exc_info.value.time_seconds is None

    def test_days_before(self) -> None:
        run = TrainingRun(5.0, 2400, date(2026, 10, 1))
        assert run.days_before(date(2026, 10, 18)) == 17
        assert run.days_before(date(2026, 9, 30)) == -1
