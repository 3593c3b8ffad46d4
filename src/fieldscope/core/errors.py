# topmark:header:start
#
#   project      : FieldScope
#   file         : errors.py
#   file_relpath : src/fieldscope/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while marshalling.

Every error is terminal for the `marshal()` call that raised it: the walk stops
at the first failure and no partial result is returned.

Exceptions raised by a value's own `marshal()` method (see
[`Marshaller`][fieldscope.core.classify.Marshaller]) are not wrapped and
propagate unchanged.
"""

from __future__ import annotations


class FieldscopeError(Exception):
    """Base class for all FieldScope errors."""


class InvalidInputTypeError(FieldscopeError, TypeError):
    """Raised when a mapping cannot be marshalled because a key is not a string.

    Attributes:
        kind: Type of the offending key.
        data: The original mapping that was being marshalled.
    """

    def __init__(self, kind: type, data: object) -> None:
        self.kind: type = kind
        self.data: object = data
        super().__init__(
            f"marshaller: Unable to marshal mapping with {kind.__name__!r} keys. "
            "String keys required."
        )


class VersionParseError(FieldscopeError, ValueError):
    """Raised when a version string (`since` / `until` tag or target version) is malformed.

    Attributes:
        value: The raw version text.
        field: Name of the record field carrying the tag, if any.
        tag: Name of the tag (`"since"` or `"until"`), if any.
    """

    def __init__(self, value: str, *, field: str | None = None, tag: str | None = None) -> None:
        self.value: str = value
        self.field: str | None = field
        self.tag: str | None = tag
        where: str = f" in {tag!r} tag of field {field!r}" if field and tag else ""
        super().__init__(f"Malformed version {value!r}{where}")
