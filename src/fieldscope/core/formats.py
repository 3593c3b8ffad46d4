# topmark:header:start
#
#   project      : FieldScope
#   file         : formats.py
#   file_relpath : src/fieldscope/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Wire formats a marshalled tree can be encoded to.

Shared by [`fieldscope.encoders`][fieldscope.encoders] and the CLI so both agree
on the same format vocabulary without introducing `Click` dependencies here.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for encoded trees.

    Attributes:
        JSON: A single pretty-printed JSON document.
        NDJSON: One compact JSON document per line.
        TOML: A TOML document (top-level node must be a mapping; nulls are dropped).
    """

    JSON = "json"
    NDJSON = "ndjson"
    TOML = "toml"
