from __future__ import annotations

import pytest

from timeline import Entry
from timeline.models import now_ms


def test_now_ms_ignores_wall_clock_steps(monkeypatch: pytest.MonkeyPatch):
    before = now_ms()
    # A wall clock stepped back to the epoch must not move readings backwards.
    monkeypatch.setattr("timeline.models.time.time_ns", lambda: 0)

    assert now_ms() >= before


def test_entry_duration_only_once_terminal():
    pending = Entry(correlation_id="c", kind="async", label="l", glyph="g", start_time=100)
    terminal = pending.model_copy(update={"end_time": 350, "success": True})

    assert pending.is_pending and pending.duration_ms is None
    assert terminal.is_terminal and terminal.duration_ms == 250
