# topmark:header:start
#
#   project      : FieldScope
#   file         : options.py
#   file_relpath : src/fieldscope/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and verbosity resolution for the FieldScope CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from fieldscope.cli.errors import FieldscopeUsageError
from fieldscope.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level, or None when neither flag is given (environment or
        default applies).

    Raises:
        FieldscopeUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` set ERROR.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FieldscopeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count > 0:
        return logging.ERROR
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f
