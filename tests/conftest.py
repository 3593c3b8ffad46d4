# topmark:header:start
#
#   project      : FieldScope
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FieldScope test suite.

Sets up TRACE logging for the run and keeps a developer's FIELDSCOPE_LOG_LEVEL
from leaking into tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fieldscope.config import logging


@pytest.fixture(autouse=True)
def silence_fieldscope_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure the runtime log level is not forced via env during tests.

    CLI invocations reconfigure the root logger against Click's temporary streams,
    so the test-wide logging setup is restored afterwards.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop FIELDSCOPE_LOG_LEVEL.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for all tests so walker decisions show up in failure reports.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
