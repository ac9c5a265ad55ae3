"""Async timeline recorder.

This package provides a small, in-process toolkit for:
- Tracking awaitables (and labels) with their start/end times and outcome.
- Keeping one append-only log entry per observed state of each tracked call.
- Playing the log back as a readable timeline, with optional tabular data.

Nothing is persisted; a recorder lives as long as the run it instruments.
"""

from .bullets import DEFAULT_BULLETS, BulletCycler, default_cycler
from .formatting import format_time
from .models import Entry
from .playback import Playback
from .recorder import Recorder
from .sinks import InMemorySink, print_table

__all__ = [
    "DEFAULT_BULLETS",
    "BulletCycler",
    "Entry",
    "InMemorySink",
    "Playback",
    "Recorder",
    "default_cycler",
    "format_time",
    "print_table",
]
