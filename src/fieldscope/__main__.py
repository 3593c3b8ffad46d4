# topmark:header:start
#
#   project      : FieldScope
#   file         : __main__.py
#   file_relpath : src/fieldscope/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FieldScope via ``python -m fieldscope``.

Delegates directly to :func:`fieldscope.cli.main.cli`.

Examples:
    Render a record from an importable module::

        python -m fieldscope render myapp.models:sample_user --group admin
"""

from __future__ import annotations

from fieldscope.cli.main import cli

if __name__ == "__main__":
    cli()
