# topmark:header:start
#
#   project      : FieldScope
#   file         : walker.py
#   file_relpath : src/fieldscope/core/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive, visibility-filtered marshalling of records into generic trees.

[`marshal`][fieldscope.core.walker.marshal] turns a record (dataclass instance)
into a ``dict`` of plain values that can be handed to a generic encoder (see
[`fieldscope.encoders`][fieldscope.encoders]). Each field is filtered by:

- group membership: the field's ``groups`` tag against `Options.groups`, plus the
  groups inherited from enclosing fields (inherit mode or embedded fields);
- version range: the ``since`` / ``until`` tags against `Options.api_version`;
- tags: ``-`` skips a field, ``omitempty`` drops empty values.

Every field is walked even when it will be dropped, so errors in hidden subtrees
still surface and the parents scope stays balanced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from fieldscope.config.logging import get_logger
from fieldscope.core.classify import ValueKind, classify, is_record
from fieldscope.core.errors import InvalidInputTypeError, VersionParseError
from fieldscope.core.group_set import GroupSet
from fieldscope.core.options import Options, parse_version
from fieldscope.core.tags import SINCE_TAG, UNTIL_TAG, describe_fields, is_empty_value

if TYPE_CHECKING:
    from packaging.version import Version

    from fieldscope.config.logging import FieldscopeLogger
    from fieldscope.core.classify import Marshaller
    from fieldscope.core.tags import FieldDescriptor

logger: FieldscopeLogger = get_logger(__name__)


def marshal(options: Options | None, data: object) -> object:
    """Marshal `data` into a generic tree filtered by `options`.

    Args:
        options (Options | None): Visibility options; ``None`` means `Options()`.
        data (object): The value to marshal, usually a dataclass instance.

    Returns:
        object: A ``dict[str, object]`` when `data` is a record, otherwise the
            marshalled value (list, dict, scalar or ``None``).

    Raises:
        InvalidInputTypeError: If a mapping with non-string keys is encountered.
        VersionParseError: If a ``since`` / ``until`` tag is malformed.
    """
    opts: Options = options if options is not None else Options()
    activation: GroupSet = GroupSet.from_names(opts.groups)
    parents = GroupSet()
    logger.debug(
        "Marshalling %s (groups=%s, api_version=%s, include_ungrouped=%s, inherit_groups=%s)",
        type(data).__name__,
        list(opts.groups),
        opts.api_version,
        opts.include_ungrouped,
        opts.inherit_groups,
    )
    return _marshal_object(opts, data, activation, parents, embedded_parents=False)


def _tag_version(desc: FieldDescriptor, tag: str, text: str) -> Version:
    try:
        return parse_version(text)
    except VersionParseError as exc:
        raise VersionParseError(text, field=desc.attr, tag=tag) from exc


def _visible_from_version(options: Options, desc: FieldDescriptor) -> bool:
    # Tags are parsed even without a target version so malformed tags always fail.
    since: Version | None = _tag_version(desc, SINCE_TAG, desc.since) if desc.since else None
    until: Version | None = _tag_version(desc, UNTIL_TAG, desc.until) if desc.until else None
    target: Version | None = options.api_version
    if target is None:
        return True
    if since is not None and target < since:
        return False
    return not (until is not None and target > until)


def _marshal_object(
    options: Options,
    data: object,
    activation: GroupSet,
    parents: GroupSet,
    embedded_parents: bool,
) -> object:
    if not is_record(data):
        return _marshal_value(options, data, activation, parents, embedded_parents=False)

    dest: dict[str, object] = {}

    for desc in describe_fields(type(data)):
        if desc.skip or not desc.exported:
            continue
        try:
            value: Any = getattr(data, desc.attr)
        except AttributeError:
            # e.g. a field declared with init=False and never assigned
            continue
        if desc.omit_empty and is_empty_value(value):
            continue

        is_embedded: bool = desc.embedded and is_record(value)

        check_groups: bool = (
            bool(options.groups)
            or (options.inherit_groups and bool(parents))
            or options.include_ungrouped
        )
        group_names: tuple[str, ...] = ()
        show_from_group = True
        if check_groups:
            group_names = desc.groups
            has_exact_match: bool = activation.contains_any(group_names)
            has_parent_match = False
            if options.inherit_groups:
                has_parent_match = parents.contains_any(options.groups)
            elif embedded_parents and not group_names:
                has_parent_match = parents.contains_any(options.groups)
            has_no_group: bool = not group_names
            show_from_group = (
                has_exact_match
                or has_parent_match
                or (has_no_group and options.include_ungrouped)
                or is_embedded
            )

        show_from_version: bool = _visible_from_version(options, desc)

        pushed: tuple[str, ...] = group_names if options.inherit_groups or is_embedded else ()
        with parents.scoped(pushed):
            node: object = _marshal_value(options, value, activation, parents, is_embedded)

        if not (show_from_group and show_from_version):
            logger.trace(
                "Dropping %s.%s (group=%s, version=%s)",
                type(data).__name__,
                desc.attr,
                show_from_group,
                show_from_version,
            )
            continue

        if is_embedded and isinstance(node, dict):
            logger.trace("Flattening embedded %s.%s", type(data).__name__, desc.attr)
            dest.update(cast("dict[str, object]", node))
        else:
            dest[desc.key] = node

    return dest


def _marshal_value(
    options: Options,
    value: object,
    activation: GroupSet,
    parents: GroupSet,
    embedded_parents: bool,
) -> object:
    kind: ValueKind = classify(value)

    if kind is ValueKind.ABSENT:
        return None
    if kind is ValueKind.SELF_SERIALIZING:
        return cast("Marshaller", value).marshal(options)
    if kind in (ValueKind.SELF_DESCRIBING, ValueKind.SCALAR):
        return value
    if kind is ValueKind.RECORD:
        return _marshal_object(options, value, activation, parents, embedded_parents)
    if kind is ValueKind.SEQUENCE:
        items: list[object] = list(cast("Any", value))
        return [
            _marshal_value(options, item, activation, parents, embedded_parents) for item in items
        ]

    mapping: Mapping[object, object] = cast("Mapping[object, object]", value)
    if not mapping:
        return None
    for key in mapping:
        if not isinstance(key, str):
            raise InvalidInputTypeError(type(key), value)
    return {
        cast("str", key): _marshal_value(options, item, activation, parents, embedded_parents)
        for key, item in mapping.items()
    }
