from __future__ import annotations

import logging

import pytest

from timeline import logging_utils


def test_setup_logging_configures_once(monkeypatch: pytest.MonkeyPatch):
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_utils, "_configured", False)
    monkeypatch.setattr("timeline.logging_utils.logging.basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_utils.setup_logging("debug")
    logging_utils.setup_logging("error")

    assert calls == [
        {"level": "DEBUG", "format": logging_utils.LOG_FORMAT, "datefmt": logging_utils.DATE_FORMAT}
    ]


def test_get_logger_returns_named_logger():
    assert logging_utils.get_logger("timeline.recorder") is logging.getLogger("timeline.recorder")
