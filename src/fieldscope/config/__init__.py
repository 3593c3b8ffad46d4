# topmark:header:start
#
#   project      : FieldScope
#   file         : __init__.py
#   file_relpath : src/fieldscope/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for FieldScope.

- ``logging``: TRACE-capable, chalk-colored logging setup.
- ``keys``: canonical TOML key names.
- ``loaders``: read `Options` from ``fieldscope.toml`` / ``pyproject.toml``.
"""

from __future__ import annotations
