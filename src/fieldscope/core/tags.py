# topmark:header:start
#
#   project      : FieldScope
#   file         : tags.py
#   file_relpath : src/fieldscope/core/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field tags and per-type field descriptor tables.

Records are dataclasses. Each field may carry string tags in its metadata, under
the [`TAG_NAMESPACE`][fieldscope.core.tags.TAG_NAMESPACE] key:

- ``name``: output key, optionally followed by ``,omitempty``. An empty key keeps
  the attribute name; the key ``-`` drops the field entirely.
- ``groups``: comma-separated group names. Whitespace around each name is
  stripped and empty names are dropped, so ``"a, b"`` means ``a`` and ``b``.
- ``since`` / ``until``: version bounds (inclusive).
- ``embedded``: ``"true"`` to flatten a record-typed field into its parent.

Example:
    ```python
    @dataclass
    class User:
        name: str
        email: str = field(groups=("admin",), since="2")
        password: str = field(skip=True)
    ```

Descriptor tables are computed once per record type and cached.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from numbers import Number
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

TAG_NAMESPACE: Final[str] = "fieldscope"

NAME_TAG: Final[str] = "name"
GROUPS_TAG: Final[str] = "groups"
SINCE_TAG: Final[str] = "since"
UNTIL_TAG: Final[str] = "until"
EMBEDDED_TAG: Final[str] = "embedded"

SKIP_SENTINEL: Final[str] = "-"
OMITEMPTY_OPTION: Final[str] = "omitempty"

_TRUE_TEXTS: Final[frozenset[str]] = frozenset({"true", "1", "yes"})


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Everything the walker needs to know about one record field.

    Attributes:
        attr: Python attribute name.
        key: Output key.
        omit_empty: Drop the field when its value is empty.
        skip: Never visit the field.
        groups: Declared group names (may be empty).
        since: Raw ``since`` tag, if any.
        until: Raw ``until`` tag, if any.
        embedded: Flatten the field's record value into the parent mapping.
        exported: False for private (underscore-prefixed) attributes.
    """

    attr: str
    key: str
    omit_empty: bool = False
    skip: bool = False
    groups: tuple[str, ...] = ()
    since: str | None = None
    until: str | None = None
    embedded: bool = False
    exported: bool = True


def parse_name_tag(tag: str) -> tuple[str, frozenset[str]]:
    """Split a naming tag into its key and its options.

    Args:
        tag (str): Raw tag text, e.g. ``"id,omitempty"``.

    Returns:
        tuple[str, frozenset[str]]: The key (possibly empty) and the set of options.
    """
    key, _, rest = tag.partition(",")
    opts: frozenset[str] = frozenset(o.strip() for o in rest.split(",") if o.strip())
    return key.strip(), opts


def parse_groups_tag(tag: str | Iterable[str] | None) -> tuple[str, ...]:
    """Return the group names of a ``groups`` tag.

    Whitespace around names is stripped and empty names are dropped.
    """
    if not tag:
        return ()
    parts: Iterable[str] = tag.split(",") if isinstance(tag, str) else tag
    return tuple(name.strip() for name in parts if name.strip())


def _tags_of(f: dataclasses.Field[Any]) -> Mapping[str, Any]:
    tags: Any = f.metadata.get(TAG_NAMESPACE)
    return tags if tags else {}


def build_descriptor(f: dataclasses.Field[Any]) -> FieldDescriptor:
    """Derive the descriptor of a single dataclass field from its tags."""
    tags: Mapping[str, Any] = _tags_of(f)
    key, opts = parse_name_tag(str(tags.get(NAME_TAG, "")))
    skip: bool = key == SKIP_SENTINEL
    since: Any = tags.get(SINCE_TAG)
    until: Any = tags.get(UNTIL_TAG)
    return FieldDescriptor(
        attr=f.name,
        key=key or f.name,
        omit_empty=OMITEMPTY_OPTION in opts,
        skip=skip,
        groups=parse_groups_tag(tags.get(GROUPS_TAG)),
        since=str(since) if since else None,
        until=str(until) if until else None,
        embedded=str(tags.get(EMBEDDED_TAG, "")).lower() in _TRUE_TEXTS,
        exported=not f.name.startswith("_"),
    )


@lru_cache(maxsize=None)
def describe_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the descriptor table of a dataclass type, in declaration order.

    Args:
        cls (type): A dataclass type.

    Returns:
        tuple[FieldDescriptor, ...]: One descriptor per field.
    """
    return tuple(build_descriptor(f) for f in dataclasses.fields(cls))


def field(
    *,
    name: str | None = None,
    omitempty: bool = False,
    skip: bool = False,
    groups: str | Iterable[str] = (),
    since: str | None = None,
    until: str | None = None,
    embedded: bool = False,
    metadata: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field carrying FieldScope tags.

    Wraps `dataclasses.field`; every extra keyword argument (``default``,
    ``default_factory``, ``repr``...) is forwarded to it.

    Args:
        name (str | None): Output key; defaults to the attribute name.
        omitempty (bool): Drop the field when its value is empty.
        skip (bool): Never output the field.
        groups (str | Iterable[str]): Group names (or a comma-separated string).
            Names are stripped of surrounding whitespace; empty names are dropped.
        since (str | None): First version the field is output for.
        until (str | None): Last version the field is output for.
        embedded (bool): Flatten the field's record value into the parent.
        metadata (Mapping[str, Any] | None): Additional metadata to keep.
        **kwargs (Any): Forwarded to `dataclasses.field`.

    Returns:
        Any: The `dataclasses.Field` object.
    """
    name_tag: str = SKIP_SENTINEL if skip else (name or "")
    if omitempty and not skip:
        name_tag = f"{name_tag},{OMITEMPTY_OPTION}"

    tags: dict[str, str] = {}
    if name_tag:
        tags[NAME_TAG] = name_tag
    group_names: tuple[str, ...] = parse_groups_tag(groups)
    if group_names:
        tags[GROUPS_TAG] = ",".join(group_names)
    if since:
        tags[SINCE_TAG] = since
    if until:
        tags[UNTIL_TAG] = until
    if embedded:
        tags[EMBEDDED_TAG] = "true"

    merged: dict[str, Any] = dict(metadata or {})
    merged[TAG_NAMESPACE] = tags
    return dataclasses.field(metadata=merged, **kwargs)


def is_empty_value(value: object) -> bool:
    """Return True if `value` is the empty value of its type.

    Empty values are `None`, `False`, numeric zero, and empty strings or containers.
    Records are never empty.
    """
    if value is None or value is False:
        return True
    if dataclasses.is_dataclass(value):
        return False
    if isinstance(value, Number):
        return value == 0
    try:
        return len(value) == 0  # type: ignore[arg-type]
    except TypeError:
        return False
