"""Enumerations and tunable constants for the fitness engine.

Methodology follows Daniels' Running Formula (VDOT tables); the multipliers
and weights below are coaching heuristics, not measured physiology.
"""

from enum import Enum, IntEnum, auto


class ExperienceTier(IntEnum):
    """Runner experience level. Lower value means faster expected improvement."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class ReferenceCategory(Enum):
    """Which benchmark column of the reference table a pace is compared to."""

    MILE = "mile"
    FIVE_K = "5k"
    TEN_K = "10k"


class TrainingZone(IntEnum):
    """Named training intensities ordered from slowest to fastest."""

    EASY = auto()
    MARATHON = auto()
    THRESHOLD = auto()
    INTERVAL = auto()
    REPETITION = auto()


# ---------------------------------------------------------------------------
# VDOT domain
# ---------------------------------------------------------------------------
VDOT_MIN = 20
VDOT_MAX = 85

# Cold-start value for athletes with no usable history
DEFAULT_VDOT = 35

# ---------------------------------------------------------------------------
# Reference table normalisation
# ---------------------------------------------------------------------------
FIVE_K_MILES = 3.1
TEN_K_MILES = 6.2

# Upper distance bound (miles) for each reference category
MILE_CATEGORY_MAX_MILES = 1.2
FIVE_K_CATEGORY_MAX_MILES = 3.5

# ---------------------------------------------------------------------------
# Training-history estimation
# ---------------------------------------------------------------------------
# Runs longer than a marathon are treated as logging errors
MAX_RUN_DISTANCE_MILES = 26.2

# Linear recency decay over 90 days, floored so old runs still count
RECENCY_WINDOW_DAYS = 90
RECENCY_WEIGHT_FLOOR = 0.1

# Weight used when a run has no perceived-effort rating
DEFAULT_EFFORT_WEIGHT = 0.8

# ---------------------------------------------------------------------------
# Training pace multipliers applied to the anchor mile pace
# ---------------------------------------------------------------------------
PACE_MULTIPLIERS: dict[TrainingZone, float] = {
    TrainingZone.EASY: 1.25,
    TrainingZone.MARATHON: 1.12,
    TrainingZone.THRESHOLD: 1.08,
    TrainingZone.INTERVAL: 0.98,
    TrainingZone.REPETITION: 0.92,
}

# ---------------------------------------------------------------------------
# Race prediction
# ---------------------------------------------------------------------------
# (upper distance bound in miles, zone whose pace is held for the race)
PREDICTION_BANDS: tuple[tuple[float, TrainingZone], ...] = (
    (1.5, TrainingZone.REPETITION),
    (5.0, TrainingZone.INTERVAL),
    (15.0, TrainingZone.THRESHOLD),
)
LONG_RACE_ZONE = TrainingZone.MARATHON

MILE_MILES = 1.0
HALF_MARATHON_MILES = 13.1
MARATHON_MILES = 26.2

# ---------------------------------------------------------------------------
# Target projection
# ---------------------------------------------------------------------------
# Maximum sustainable VDOT gain per week. Improvement decelerates with
# experience; tune these rather than treating them as ground truth.
IMPROVEMENT_RATE_PER_WEEK: dict[ExperienceTier, float] = {
    ExperienceTier.BEGINNER: 0.8,
    ExperienceTier.INTERMEDIATE: 0.5,
    ExperienceTier.ADVANCED: 0.3,
}
DEFAULT_PROJECTION_WEEKS = 12

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
KM_PER_MILE = 1.60934
