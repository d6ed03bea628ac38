"""Rounding and clamping shared by the VDOT math."""

from __future__ import annotations

import math

from fitness_engine.models.enums import VDOT_MAX, VDOT_MIN


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's round() uses banker's rounding (round(0.5) == 0); paces and
    VDOTs are rounded the conventional way so 292.5 s becomes 293 s.
    """
    return int(math.floor(value + 0.5))


def clamp_vdot(value: float) -> float:
    """Clamp a VDOT into [VDOT_MIN, VDOT_MAX] without rounding."""
    return max(VDOT_MIN, min(VDOT_MAX, value))
