"""Render a recorder's log as a human-readable timeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .formatting import format_time
from .models import Entry
from .sinks import LineSink, TableSink, print_table

LABEL_ICON: Final = "📝"
IN_FLIGHT_ICON: Final = "✔️ "
MISUSE_ICON: Final = "☑️ "
SUCCESS_ICON: Final = "✅"
FAILURE_ICON: Final = "❌"

PENDING_MARK: Final = "⏳"
ELAPSED_MARK: Final = "⏱️"
UNKNOWN_DURATION: Final = "??:??:??.???"


class Playback:
    """Read-only view over a log, rendered one line per entry in stored order."""

    def __init__(self, origin: int, entries: Sequence[Entry], *, show_data: bool = True) -> None:
        self.origin = origin
        self.entries = tuple(entries)
        self.show_data = show_data

    def format_entry(self, entry: Entry) -> str:
        """Render a single entry; pending and terminal entries use different layouts."""
        if entry.end_time is None:
            icon = LABEL_ICON if entry.kind == "label" else IN_FLIGHT_ICON
            at = format_time(entry.start_time - self.origin)
            return f"{icon} {at} {PENDING_MARK} {UNKNOWN_DURATION} {entry.glyph} {entry.label}"

        if entry.kind == "sync-misuse":
            icon = MISUSE_ICON
        elif entry.success:
            icon = SUCCESS_ICON
        else:
            icon = FAILURE_ICON
        at = format_time(entry.end_time - self.origin)
        elapsed = format_time(entry.end_time - entry.start_time)
        line = f"{icon} {at} {ELAPSED_MARK} {elapsed} {entry.glyph} {entry.label}"
        if entry.error:
            line += f" [{entry.error}]"
        return line

    def render(self) -> list[str]:
        """Return every rendered line without touching any sink."""
        return [self.format_entry(entry) for entry in self.entries]

    def play(self, line_sink: LineSink = print, table_sink: TableSink = print_table) -> None:
        """Emit each line, followed by the entry's data when it carries any."""
        for entry in self.entries:
            line_sink(self.format_entry(entry))
            if self.show_data and entry.data is not None:
                table_sink(entry.data)
