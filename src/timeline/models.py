"""Timeline entry models.

Entries are designed to be:
- Immutable snapshots; a tracked operation appends a new entry per state change.
- Easy to pair across states via a correlation identifier.
- Rendered later, so they carry raw epoch timestamps rather than durations.
"""

from __future__ import annotations

import time
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


# Wall-clock reading taken once; later readings advance it monotonically.
_EPOCH_ANCHOR_NS = time.time_ns()
_MONOTONIC_ANCHOR_NS = time.monotonic_ns()


def now_ms() -> int:
    """Return the current epoch time in whole milliseconds.

    The value never decreases within a process, even if the system clock is
    stepped backwards, so durations and offsets from an origin stay >= 0.
    """
    return (_EPOCH_ANCHOR_NS + time.monotonic_ns() - _MONOTONIC_ANCHOR_NS) // 1_000_000


EntryKind = Literal["label", "sync-misuse", "async"]


class Entry(BaseModel):
    """One observed state of a tracked call (or a free-standing label)."""

    model_config = ConfigDict(frozen=True)

    # Shared by the pending and terminal snapshots of the same call.
    correlation_id: str

    kind: EntryKind
    label: str
    glyph: str

    # Epoch milliseconds; `end_time is None` means the entry is pending.
    start_time: int
    end_time: int | None = None

    # Outcome fields, set only on terminal entries.
    success: bool | None = None
    error: str | None = None

    # Whatever the caller's callback returned for this outcome.
    data: Any = None

    @property
    def is_pending(self) -> bool:
        return self.end_time is None

    @property
    def is_terminal(self) -> bool:
        return self.end_time is not None

    @property
    def duration_ms(self) -> int | None:
        """Elapsed time between start and end, or None while pending."""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time
