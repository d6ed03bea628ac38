"""Data models for the fitness engine."""

from fitness_engine.models.enums import ExperienceTier, ReferenceCategory, TrainingZone
from fitness_engine.models.paces import EquivalentTimes, PaceSet
from fitness_engine.models.performance import RaceResult, TrainingRun

__all__ = [
    "EquivalentTimes",
    "ExperienceTier",
    "PaceSet",
    "RaceResult",
    "ReferenceCategory",
    "TrainingRun",
    "TrainingZone",
]
