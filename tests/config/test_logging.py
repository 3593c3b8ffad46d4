# topmark:header:start
#
#   project      : FieldScope
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging: TRACE level, env resolution and logger class."""

from __future__ import annotations

import logging as std_logging

import pytest

from fieldscope.config import logging


@pytest.mark.parametrize(
    ("text", "level"),
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" Warn ", std_logging.WARNING),
        ("fatal", std_logging.CRITICAL),
        ("10", 10),
        ("verbose", None),
    ],
)
def test_parse_log_level(text: str, level: int | None) -> None:
    """Level names are case-insensitive; numbers pass through; unknowns give None."""
    assert logging.parse_log_level(text) == level


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """FIELDSCOPE_LOG_LEVEL drives the level when set."""
    assert logging.resolve_env_log_level() is None
    monkeypatch.setenv(logging.LOG_LEVEL_ENV_VAR, "INFO")
    assert logging.resolve_env_log_level() == std_logging.INFO


def test_trace_level_is_registered() -> None:
    """TRACE sits below DEBUG and has a level name."""
    assert logging.TRACE_LEVEL < std_logging.DEBUG
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers expose `trace()` which logs at TRACE level."""
    log = logging.get_logger("fieldscope.tests.trace_probe")
    assert isinstance(log, logging.FieldscopeLogger)
    with caplog.at_level(logging.TRACE_LEVEL):
        log.trace("probe %s", 1)
    assert any(r.levelno == logging.TRACE_LEVEL and r.getMessage() == "probe 1" for r in caplog.records)


def test_setup_logging_installs_single_chalk_handler() -> None:
    """setup_logging replaces root handlers with one chalk-formatted handler."""
    logging.setup_logging(level=std_logging.INFO)
    root = std_logging.getLogger()
    assert root.level == std_logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, logging.ChalkFormatter)
