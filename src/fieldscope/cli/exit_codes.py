# topmark:header:start
#
#   project      : FieldScope
#   file         : exit_codes.py
#   file_relpath : src/fieldscope/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FieldScope CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FieldScope CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        MARSHAL_ERROR: The target could not be marshalled or encoded (non-string
            mapping keys, malformed version tags, non-table TOML output).
            Mirrors BSD ``EX_DATAERR (65)``.
        TARGET_NOT_FOUND: The ``module:attr`` target cannot be imported or
            resolved. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    MARSHAL_ERROR = 65  # EX_DATAERR
    TARGET_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
