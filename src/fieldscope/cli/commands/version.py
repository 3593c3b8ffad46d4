# topmark:header:start
#
#   project      : FieldScope
#   file         : version.py
#   file_relpath : src/fieldscope/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope `version` command.

Prints the FieldScope version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from fieldscope.constants import FIELDSCOPE_VERSION
from fieldscope.core.formats import OutputFormat
from fieldscope.encoders import to_json


@click.command(
    name="version",
    help="Show the current version of FieldScope.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", OutputFormat.JSON.value]),
    default="text",
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of FieldScope.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    if output_format == OutputFormat.JSON.value:
        click.echo(to_json({"version": FIELDSCOPE_VERSION}, indent=None))
    else:
        click.echo(FIELDSCOPE_VERSION)
