# topmark:header:start
#
#   project      : FieldScope
#   file         : keys.py
#   file_relpath : src/fieldscope/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for FieldScope configuration.

Options can be read from ``fieldscope.toml`` (top-level keys) or from the
``[tool.fieldscope]`` table of ``pyproject.toml``. Renaming or removing a key is
a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML file names, section names and keys used by FieldScope configuration."""

    FILENAME: Final[str] = "fieldscope.toml"
    PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

    # [tool.fieldscope] inside pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_FIELDSCOPE: Final[str] = "fieldscope"

    KEY_GROUPS: Final[str] = "groups"
    KEY_API_VERSION: Final[str] = "api_version"
    KEY_INCLUDE_UNGROUPED: Final[str] = "include_ungrouped"
    KEY_INHERIT_GROUPS: Final[str] = "inherit_groups"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_GROUPS, KEY_API_VERSION, KEY_INCLUDE_UNGROUPED, KEY_INHERIT_GROUPS}
    )
