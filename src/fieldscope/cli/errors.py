# topmark:header:start
#
#   project      : FieldScope
#   file         : errors.py
#   file_relpath : src/fieldscope/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FieldScope CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Click prints the message to stderr and exits with `exit_code`.
"""

from __future__ import annotations

import click

from fieldscope.cli.exit_codes import ExitCode


class FieldscopeCliError(click.ClickException):
    """Base class for all FieldScope CLI errors."""

    exit_code = ExitCode.FAILURE


class FieldscopeUsageError(FieldscopeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FieldscopeConfigError(FieldscopeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class FieldscopeTargetError(FieldscopeCliError):
    """Error when the render target cannot be imported or resolved."""

    exit_code = ExitCode.TARGET_NOT_FOUND


class FieldscopeMarshalError(FieldscopeCliError):
    """Error when marshalling or encoding the target fails."""

    exit_code = ExitCode.MARSHAL_ERROR
