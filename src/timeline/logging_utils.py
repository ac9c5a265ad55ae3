"""Logging setup for the timeline package and its demo entrypoint."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging at `level` (a logging level name); later calls are no-ops."""
    global _configured

    if _configured:
        return

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=DATE_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
