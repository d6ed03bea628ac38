"""Display helpers for paces, durations and distances."""

from __future__ import annotations

from fitness_engine.math.rounding import round_half_up
from fitness_engine.models.enums import KM_PER_MILE


def format_pace(s_per_mile: float) -> str:
    """Convert seconds-per-mile to 'M:SS'. e.g. 292 -> '4:52'."""
    if s_per_mile <= 0:
        return "--"
    total_secs = round_half_up(s_per_mile)
    mins = total_secs // 60
    secs = total_secs % 60
    return f"{mins}:{secs:02d}"


def parse_pace(text: str) -> int:
    """Parse 'M:SS' into seconds. e.g. '7:07' -> 427.

    Raises:
        ValueError: If the text is not minutes and seconds separated by ':'.
    """
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Pace must look like M:SS, got {text!r}")
    mins, secs = (int(p) for p in parts)
    if mins < 0 or not 0 <= secs < 60:
        raise ValueError(f"Pace must look like M:SS, got {text!r}")
    return mins * 60 + secs


def format_duration(seconds: float) -> str:
    """Format seconds as 'M:SS', or 'H:MM:SS' from one hour up."""
    if seconds <= 0:
        return "0:00"
    total_secs = round_half_up(seconds)
    hours = total_secs // 3600
    minutes = (total_secs % 3600) // 60
    secs = total_secs % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(miles: float, unit: str = "miles") -> str:
    """Format a distance. e.g. 5 -> '5.00 miles', (5, 'km') -> '8.05 km'."""
    if unit == "km":
        return f"{miles * KM_PER_MILE:.2f} km"
    if unit != "miles":
        raise ValueError(f"unit must be 'miles' or 'km', got {unit!r}")
    return f"{miles:.2f} miles"


def pace_per_km(s_per_mile: float) -> float:
    """Convert a pace in seconds per mile to seconds per km."""
    return s_per_mile / KM_PER_MILE
