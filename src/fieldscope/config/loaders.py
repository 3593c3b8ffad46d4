# topmark:header:start
#
#   project      : FieldScope
#   file         : loaders.py
#   file_relpath : src/fieldscope/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load marshalling options from TOML sources.

Supported sources:
- ``fieldscope.toml``: keys at the top level;
- ``pyproject.toml``: keys in the ``[tool.fieldscope]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fieldscope.config.keys import Toml
from fieldscope.config.logging import get_logger
from fieldscope.core.errors import FieldscopeError
from fieldscope.core.options import Options, parse_version

if TYPE_CHECKING:
    from pathlib import Path

    from fieldscope.config.logging import FieldscopeLogger

logger: FieldscopeLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(FieldscopeError):
    """Raised when a configuration source is unreadable or holds invalid values."""


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the FieldScope table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.fieldscope]`` (empty if missing);
    otherwise the whole document.
    """
    if not is_pyproject:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_FIELDSCOPE, {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def _as_bool(key: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"Config key {key!r} must be a boolean, got {type(value).__name__}")
    return value


def _as_groups(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(name.strip() for name in value.split(",") if name.strip())
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[object]", value)):
        return tuple(cast("list[str]", value))
    raise ConfigError(f"Config key {Toml.KEY_GROUPS!r} must be a list of strings")


def options_from_mapping(data: Mapping[str, Any]) -> Options:
    """Build `Options` from a configuration mapping.

    Unknown keys are logged and ignored.

    Args:
        data (Mapping[str, Any]): Configuration values keyed by
            [`Toml`][fieldscope.config.keys.Toml] key names.

    Returns:
        Options: The resulting options.

    Raises:
        ConfigError: If a value has the wrong type or `api_version` is malformed.
    """
    for key in data:
        if key not in Toml.ALL_KEYS:
            logger.warning("Ignoring unknown config key %r", key)

    groups: tuple[str, ...] = _as_groups(data.get(Toml.KEY_GROUPS, []))

    raw_version: Any = data.get(Toml.KEY_API_VERSION)
    if raw_version is not None and not isinstance(raw_version, (str, int, float)):
        raise ConfigError(f"Config key {Toml.KEY_API_VERSION!r} must be a string")
    try:
        version = parse_version(str(raw_version)) if raw_version is not None else None
    except FieldscopeError as exc:
        raise ConfigError(f"Config key {Toml.KEY_API_VERSION!r}: {exc}") from exc

    return Options(
        groups=groups,
        api_version=version,
        include_ungrouped=_as_bool(
            Toml.KEY_INCLUDE_UNGROUPED, data.get(Toml.KEY_INCLUDE_UNGROUPED, False)
        ),
        inherit_groups=_as_bool(
            Toml.KEY_INHERIT_GROUPS, data.get(Toml.KEY_INHERIT_GROUPS, False)
        ),
    )


def load_options(path: Path) -> Options:
    """Load `Options` from ``fieldscope.toml`` or ``pyproject.toml``.

    Args:
        path (Path): The configuration file.

    Returns:
        Options: The configured options.

    Raises:
        ConfigError: If the file is unreadable or holds invalid values.
    """
    data: TomlTable = load_toml_dict(path)
    is_pyproject: bool = path.name == Toml.PYPROJECT_FILENAME
    return options_from_mapping(extract_section(data, is_pyproject=is_pyproject))


def discover_config(directory: Path) -> Path | None:
    """Find a configuration file in `directory`.

    ``fieldscope.toml`` wins; ``pyproject.toml`` is used only when it has a
    ``[tool.fieldscope]`` table.

    Args:
        directory (Path): Directory to search (not its parents).

    Returns:
        Path | None: The configuration file, or None if there is none.
    """
    candidate: Path = directory / Toml.FILENAME
    if candidate.is_file():
        return candidate
    pyproject: Path = directory / Toml.PYPROJECT_FILENAME
    if pyproject.is_file():
        data: TomlTable = load_toml_dict(pyproject)
        if extract_section(data, is_pyproject=True):
            return pyproject
        logger.debug("%s has no [tool.fieldscope] table", pyproject)
    return None
