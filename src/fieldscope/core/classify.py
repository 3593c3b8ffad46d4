# topmark:header:start
#
#   project      : FieldScope
#   file         : classify.py
#   file_relpath : src/fieldscope/core/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value classification for the marshalling walker.

`classify()` decides how the walker treats a value, in this priority order:

1. `ABSENT`: `None`.
2. `SELF_SERIALIZING`: implements [`Marshaller`][fieldscope.core.classify.Marshaller];
   the walker delegates the whole subtree to it.
3. `SELF_DESCRIBING`: the downstream encoder already knows how to render it
   (registered passthrough types, ``__json__`` / ``__html__`` hooks, or a class
   with its own ``__str__`` that is not a container). Passed through unchanged, so e.g. `bytes` stays a
   single value instead of a list of small integers.
4. `RECORD`: a dataclass instance.
5. `SEQUENCE`: lists, tuples, sets and other non-text sequences.
6. `MAPPING`: any `collections.abc.Mapping`.
7. `SCALAR`: everything else.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import ipaddress
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from fieldscope.core.options import Options


@runtime_checkable
class Marshaller(Protocol):
    """A value that produces its own marshalled representation.

    The walker calls `marshal()` with the active options and uses the result
    verbatim; group and version filtering of the value's internals is up to
    the implementation. Exceptions raised here abort the whole call.
    """

    def marshal(self, options: Options) -> object:
        """Return the marshalled representation of this value."""
        ...


class ValueKind(Enum):
    """How the walker handles a value."""

    ABSENT = "absent"
    SELF_SERIALIZING = "self_serializing"
    SELF_DESCRIBING = "self_describing"
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


_SCALAR_TYPES: Final[tuple[type, ...]] = (bool, int, float, complex)

_TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)

_self_describing_types: list[type] = [
    str,
    bytes,
    bytearray,
    memoryview,
    Enum,
    PurePath,
    dt.date,
    dt.time,
    dt.timedelta,
    UUID,
    Decimal,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
]

_SELF_DESCRIBING_HOOKS: Final[tuple[str, ...]] = ("__json__", "__html__")


def register_self_describing(cls: type) -> type:
    """Register `cls` (and its subclasses) as passthrough values.

    Usable as a class decorator.

    Args:
        cls (type): The type the downstream encoder renders natively.

    Returns:
        type: `cls`, unchanged.
    """
    if cls not in _self_describing_types:
        _self_describing_types.append(cls)
    return cls


def unregister_self_describing(cls: type) -> None:
    """Remove `cls` from the passthrough registry (no-op if absent)."""
    if cls in _self_describing_types:
        _self_describing_types.remove(cls)


def is_self_serializing(value: object) -> bool:
    """Return True if `value` implements the `Marshaller` protocol.

    Only a callable `marshal` defined on the class counts; a record field that
    happens to be named `marshal` does not.
    """
    if isinstance(value, type):
        return False
    return callable(getattr(type(value), "marshal", None))


def is_self_describing(value: object) -> bool:
    """Return True if the downstream encoder should receive `value` as is."""
    if isinstance(value, tuple(_self_describing_types)):
        return True
    cls: type = type(value)
    if isinstance(value, type):
        return False
    if any(hasattr(cls, hook) for hook in _SELF_DESCRIBING_HOOKS):
        return True
    if isinstance(value, (Mapping, Sequence, Set)):
        # Containers are walked even when they define their own __str__.
        return False
    return cls.__str__ is not object.__str__


def is_record(value: object) -> bool:
    """Return True if `value` is a dataclass instance."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_sequence(value: object) -> bool:
    """Return True for non-text sequences and sets."""
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, (Sequence, Set))


def classify(value: object) -> ValueKind:
    """Return the [`ValueKind`][fieldscope.core.classify.ValueKind] of `value`."""
    if value is None:
        return ValueKind.ABSENT
    if is_self_serializing(value):
        return ValueKind.SELF_SERIALIZING
    if type(value) in _SCALAR_TYPES:
        return ValueKind.SCALAR
    if is_self_describing(value):
        return ValueKind.SELF_DESCRIBING
    if is_record(value):
        return ValueKind.RECORD
    if is_sequence(value):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.SCALAR
