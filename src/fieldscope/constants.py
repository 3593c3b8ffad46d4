# topmark:header:start
#
#   project      : FieldScope
#   file         : constants.py
#   file_relpath : src/fieldscope/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FIELDSCOPE_VERSION: str = get_version("fieldscope")
