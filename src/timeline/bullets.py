"""Decorative glyphs used to tell tracked operations apart in a timeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

# Default catalog; callers may hand their own list to `BulletCycler`.
DEFAULT_BULLETS: Final[tuple[str, ...]] = (
    "🍎",
    "🍊",
    "🍋",
    "🍏",
    "🫐",
    "🍇",
    "🍓",
    "🍒",
    "🥝",
    "🍍",
    "🥥",
    "🍑",
)

# Fixed glyphs for entries that never go through the cycler.
LABEL_GLYPH: Final = "👉"
MISUSE_GLYPH: Final = "⚠️ "


class BulletCycler:
    """Round-robin selector over a fixed glyph catalog.

    Members:
    - Catalog: `catalog` (ordered, non-empty, distinct glyphs)
    - Counter: `counter` (number of glyphs handed out so far)
    """

    def __init__(self, catalog: Sequence[str] = DEFAULT_BULLETS, counter: int = 0) -> None:
        if not catalog:
            raise ValueError("catalog must contain at least one glyph.")
        if len(set(catalog)) != len(catalog):
            raise ValueError(f"catalog glyphs must be distinct. Got: {list(catalog)!r}")
        if counter < 0:
            raise ValueError(f"counter must be >= 0. Got: {counter}")

        self.catalog: tuple[str, ...] = tuple(catalog)
        self.counter: int = counter

    def next(self) -> str:
        """Return the glyph for the current position, then advance."""
        bullet = self.catalog[self.counter % len(self.catalog)]
        self.counter += 1
        return bullet


# Shared by every Recorder that is not given its own cycler.
default_cycler = BulletCycler()
