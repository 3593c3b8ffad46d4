# topmark:header:start
#
#   project      : FieldScope
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FieldScope in a controlled working directory.

`run_cli_in()` changes the working directory before invoking the Click CLI so
config discovery (``fieldscope.toml`` / ``pyproject.toml``) only sees files the
test created.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from fieldscope.cli.exit_codes import ExitCode
from fieldscope.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the invocation succeeded, showing output otherwise."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.exception is None, result.exception
