# topmark:header:start
#
#   project      : FieldScope
#   file         : main.py
#   file_relpath : src/fieldscope/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope CLI entry point.

Group-level options (verbosity) are initialized once and placed into ``ctx.obj``;
subcommands are registered below.
"""

from __future__ import annotations

import click

from fieldscope.cli.commands.render import render_command
from fieldscope.cli.commands.version import version_command
from fieldscope.cli.options import common_verbose_options, resolve_verbosity
from fieldscope.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    # Flags win over FIELDSCOPE_LOG_LEVEL
    level: int | None = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FieldScope CLI: marshal records with group and version filtering.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the FieldScope CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'fieldscope render MODULE:ATTR' to marshal a record.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
