"""Custom exception hierarchy for the fitness engine."""

from __future__ import annotations


class FitnessEngineError(Exception):
    """Base exception for all fitness_engine errors."""


class InvalidInput(FitnessEngineError, ValueError):
    """A race result has a non-positive distance or time.

    Raised only when evaluating a single race; noisy training runs are
    filtered instead.
    """

    def __init__(
        self,
        message: str,
        distance_miles: float | None = None,
        time_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.distance_miles = distance_miles
        self.time_seconds = time_seconds
