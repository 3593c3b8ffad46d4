# topmark:header:start
#
#   project      : FieldScope
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `lint`: Ruff lint.
  - `format_check`: Verify Ruff formatting.
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s qa`
"""

from __future__ import annotations

import sys

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "format_check", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and the type checker."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    py_ver: str = str(session.python) if session.python else CURRENT_PYTHON_VERSION
    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Lint sources and tests with Ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting with Ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests", *session.posargs)
