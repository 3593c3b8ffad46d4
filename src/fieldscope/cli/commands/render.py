# topmark:header:start
#
#   project      : FieldScope
#   file         : render.py
#   file_relpath : src/fieldscope/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope `render` command.

Marshals a Python value named by ``module:attr`` and prints it as JSON, NDJSON
or TOML. Options come from a config file (``--config``, or ``fieldscope.toml`` /
``[tool.fieldscope]`` in the working directory) and are overridden by flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from fieldscope.cli.errors import FieldscopeConfigError, FieldscopeMarshalError
from fieldscope.cli.target import resolve_target
from fieldscope.config.loaders import ConfigError, discover_config, load_options
from fieldscope.config.logging import get_logger
from fieldscope.core.errors import FieldscopeError, VersionParseError
from fieldscope.core.formats import OutputFormat
from fieldscope.core.options import Options
from fieldscope.core.walker import marshal
from fieldscope.encoders import encode

logger = get_logger(__name__)


def resolve_options(
    *,
    config_path: Path | None,
    no_config: bool,
    groups: tuple[str, ...],
    api_version: str | None,
    include_ungrouped: bool | None,
    inherit_groups: bool | None,
) -> Options:
    """Merge config file values and CLI overrides into `Options`.

    Raises:
        FieldscopeConfigError: If the config file is invalid or `api_version` is malformed.
    """
    base = Options()
    if not no_config:
        path: Path | None = config_path or discover_config(Path.cwd())
        if path is not None:
            logger.info("Using config %s", path)
            try:
                base = load_options(path)
            except ConfigError as exc:
                raise FieldscopeConfigError(str(exc)) from exc

    overrides: dict[str, Any] = {}
    if groups:
        overrides["groups"] = groups
    if api_version is not None:
        overrides["api_version"] = api_version
    if include_ungrouped is not None:
        overrides["include_ungrouped"] = include_ungrouped
    if inherit_groups is not None:
        overrides["inherit_groups"] = inherit_groups

    try:
        return base.with_overrides(**overrides)
    except VersionParseError as exc:
        raise FieldscopeConfigError(f"--api-version: {exc}") from exc


@click.command(
    name="render",
    help="Marshal the value named by TARGET (module:attr) and print it.",
)
@click.argument("target", metavar="TARGET")
@click.option(
    "-g",
    "--group",
    "groups",
    multiple=True,
    help="Activate a group (repeatable). Replaces the configured groups.",
)
@click.option("--api-version", default=None, help="Target version for since/until tags.")
@click.option(
    "--include-ungrouped/--no-include-ungrouped",
    default=None,
    help="Output fields that declare no groups.",
)
@click.option(
    "--inherit-groups/--no-inherit-groups",
    default=None,
    help="Propagate the groups of record fields to their own fields.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read options from this TOML file.",
)
@click.option("--no-config", is_flag=True, default=False, help="Ignore config files.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.JSON.value,
    show_default=True,
    help="Output format.",
)
def render_command(
    *,
    target: str,
    groups: tuple[str, ...],
    api_version: str | None,
    include_ungrouped: bool | None,
    inherit_groups: bool | None,
    config_path: Path | None,
    no_config: bool,
    output_format: str,
) -> None:
    """Marshal TARGET and print the encoded result."""
    options: Options = resolve_options(
        config_path=config_path,
        no_config=no_config,
        groups=groups,
        api_version=api_version,
        include_ungrouped=include_ungrouped,
        inherit_groups=inherit_groups,
    )
    data: object = resolve_target(target)
    fmt = OutputFormat(output_format)

    try:
        text: str = encode(marshal(options, data), fmt)
    except (FieldscopeError, ValueError) as exc:
        raise FieldscopeMarshalError(str(exc)) from exc

    click.echo(text, nl=fmt != OutputFormat.NDJSON)
