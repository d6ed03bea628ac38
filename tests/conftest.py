"""Shared test fixtures: reference dates, races and training histories."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

import pytest

from fitness_engine.models.performance import RaceResult, TrainingRun

# Fixed "today" so recency weights are deterministic
AS_OF = date(2026, 10, 18)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def run_factory() -> Callable[..., TrainingRun]:
    """Factory fixture for TrainingRun instances dated relative to AS_OF.

    Usage:
        run = run_factory(3.1, 1163, days_ago=5, effort=7)
    """

    def factory(
        distance_miles: float,
        duration_seconds: float | None,
        days_ago: int = 0,
        effort: int | None = None,
    ) -> TrainingRun:
        return TrainingRun(
            distance_miles=distance_miles,
            duration_seconds=duration_seconds,
            run_date=AS_OF - timedelta(days=days_ago),
            perceived_effort=effort,
        )

    return factory


@pytest.fixture
def vdot_40_five_k() -> RaceResult:
    """5K in 19:23, the VDOT 40 anchor time."""
    return RaceResult(distance_miles=3.1, time_seconds=1163)


@pytest.fixture
def vdot_50_five_k() -> RaceResult:
    """5K in 15:18, the VDOT 50 anchor time."""
    return RaceResult(distance_miles=3.1, time_seconds=918)


@pytest.fixture
def mixed_history(run_factory: Callable[..., TrainingRun]) -> list[TrainingRun]:
    """Two usable runs plus the kinds of noise chat extraction produces."""
    return [
        run_factory(5.0, 25 * 60, days_ago=3, effort=7),   # 5:00/mile tempo
        run_factory(3.0, 21 * 60, days_ago=1, effort=6),   # 7:00/mile
        run_factory(5.0, None, days_ago=2, effort=7),       # no duration
        run_factory(0.0, 1800, days_ago=4),                 # no distance
        run_factory(50.0, 6 * 3600, days_ago=6),            # ultra / typo
    ]
