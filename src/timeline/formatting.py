"""Clock-style formatting for millisecond durations."""

from __future__ import annotations


def format_time(duration_ms: int) -> str:
    """Render a non-negative duration in milliseconds as `HH:MM:SS.mmm`.

    Hours are not wrapped at 24, and every field is padded to its minimum
    width but never truncated (360000000 -> "100:00:00.000").
    """
    if duration_ms < 0:
        raise ValueError(f"duration_ms must be >= 0. Got: {duration_ms}")

    milliseconds = duration_ms % 1000
    total_seconds = duration_ms // 1000
    seconds = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
