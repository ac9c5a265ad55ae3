"""Configuration loading and validation.

This module is responsible for:

- Loading `.env` into the process environment (without overriding existing vars).
- Converting environment variables into strongly-typed Pydantic models.
- Validating values and providing actionable error messages.
"""

import logging
import os
from typing import TypeVar

import dotenv
from pydantic import BaseModel, Field, field_validator

_T = TypeVar("_T", int, float)


def _get_env_bool(name: str, default: bool) -> bool:
    """Read a boolean env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    normalized = raw.strip().lower()
    if normalized in {"true", "1", "yes", "y", "on"}:
        return True
    if normalized in {"false", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean (true/false). Got: {raw!r}")


def _get_env_number(name: str, default: _T, cast: type[_T]) -> _T:
    """Read an int/float env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a {cast.__name__}. Got: {raw!r}") from exc


def _get_env_list(name: str) -> list[str] | None:
    """Read a comma-separated env var; None when unset or blank."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


class TimelineConfig(BaseModel):
    """Configuration for recording and playing back timelines."""

    log_level: str = Field(default="WARNING", description="Package log level")
    show_data: bool = Field(default=True, description="Forward entry data to the table sink")
    bullets: list[str] | None = Field(default=None, description="Glyph catalog override")
    demo_sleep_ms: int = Field(default=250, description="Base sleep used by the demo run (ms)")

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Validate the level is one the logging module knows."""
        normalized = v.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"TIMELINE_LOG_LEVEL must be a logging level name. Got: {v!r}")
        return normalized

    @field_validator("bullets")
    def validate_bullets(cls, v: list[str] | None) -> list[str] | None:
        """Validate a catalog override is non-empty and has no repeats."""
        if v is None:
            return v
        if not v:
            raise ValueError("TIMELINE_BULLETS must list at least one glyph.")
        if len(set(v)) != len(v):
            raise ValueError(f"TIMELINE_BULLETS glyphs must be distinct. Got: {v!r}")
        return v

    @field_validator("demo_sleep_ms")
    def validate_demo_sleep_ms(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"TIMELINE_DEMO_SLEEP_MS must be >= 0. Got: {v}")
        return v


class Config(BaseModel):
    """Top-level application configuration."""

    timeline: TimelineConfig = Field(default_factory=TimelineConfig, description="Timeline configuration")


def load_config() -> Config:
    """Load application configuration from environment variables.

    Notes:
    - Calls `dotenv.load_dotenv()` so local `.env` values are visible to the process.
    - Every setting has a default; invalid values raise `ValueError` naming the
      offending variable.
    """
    # Load variables from `.env` into the process environment (without overriding
    # already-set env vars).
    dotenv.load_dotenv()

    timeline = TimelineConfig(
        log_level=os.getenv("TIMELINE_LOG_LEVEL", "").strip() or "WARNING",
        show_data=_get_env_bool("TIMELINE_SHOW_DATA", True),
        bullets=_get_env_list("TIMELINE_BULLETS"),
        demo_sleep_ms=_get_env_number("TIMELINE_DEMO_SLEEP_MS", 250, int),
    )
    return Config(timeline=timeline)
