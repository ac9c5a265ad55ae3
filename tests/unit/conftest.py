from __future__ import annotations

import pytest

from timeline import BulletCycler, Recorder


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cycler() -> BulletCycler:
    """A private cycler so tests don't depend on the shared counter's position."""
    return BulletCycler(["A", "B", "C"])


@pytest.fixture
def recorder(clock: FakeClock, cycler: BulletCycler) -> Recorder:
    return Recorder(cycler=cycler, clock=clock)
