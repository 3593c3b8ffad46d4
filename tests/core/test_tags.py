# topmark:header:start
#
#   project      : FieldScope
#   file         : test_tags.py
#   file_relpath : tests/core/test_tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field tags: parsing, the `field()` helper and descriptor tables."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal

import pytest

from fieldscope.core.tags import (
    TAG_NAMESPACE,
    FieldDescriptor,
    describe_fields,
    field,
    is_empty_value,
    parse_groups_tag,
    parse_name_tag,
)


@dataclass
class Tagged:
    plain: int
    renamed: str = field(name="id")
    hidden: str = field(skip=True, default="")
    sparse: str = field(omitempty=True, default="")
    renamed_sparse: str = field(name="alias", omitempty=True, default="")
    grouped: str = field(groups=["admin", " api "], default="")
    versioned: str = field(since="1.0", until="2", default="")
    inner: object = field(embedded=True, default=None)
    _private: int = 0
    handwritten: str = dataclasses.field(
        default="",
        metadata={TAG_NAMESPACE: {"name": "hw,omitempty", "groups": "a,b", "embedded": True}},
    )


def _by_attr(attr: str) -> FieldDescriptor:
    return next(d for d in describe_fields(Tagged) if d.attr == attr)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("", ("", frozenset())),
        ("id", ("id", frozenset())),
        ("id,omitempty", ("id", frozenset({"omitempty"}))),
        (",omitempty", ("", frozenset({"omitempty"}))),
        ("-", ("-", frozenset())),
    ],
)
def test_parse_name_tag(tag: str, expected: tuple[str, frozenset[str]]) -> None:
    """Naming tags split into key and options."""
    assert parse_name_tag(tag) == expected


def test_parse_groups_tag_strips_and_drops_empty_names() -> None:
    """Group names are trimmed; empty entries vanish."""
    assert parse_groups_tag("admin, api,,") == ("admin", "api")
    assert parse_groups_tag("") == ()
    assert parse_groups_tag(None) == ()
    assert parse_groups_tag(["x", ""]) == ("x",)


def test_descriptor_order_follows_declaration() -> None:
    """Descriptors come in field declaration order."""
    attrs = [d.attr for d in describe_fields(Tagged)]
    assert attrs[:3] == ["plain", "renamed", "hidden"]
    assert attrs[-1] == "handwritten"


def test_untagged_field_uses_attribute_name() -> None:
    """Without a naming tag the key is the attribute name."""
    d = _by_attr("plain")
    assert d.key == "plain"
    assert not d.skip and not d.omit_empty and d.groups == () and not d.embedded


def test_field_helper_writes_every_tag() -> None:
    """`field()` encodes names, options, groups, versions and embedding."""
    assert _by_attr("renamed").key == "id"
    assert _by_attr("hidden").skip
    assert _by_attr("sparse").omit_empty
    assert _by_attr("sparse").key == "sparse"
    assert _by_attr("renamed_sparse").key == "alias"
    assert _by_attr("renamed_sparse").omit_empty
    assert _by_attr("grouped").groups == ("admin", "api")
    assert _by_attr("versioned").since == "1.0"
    assert _by_attr("versioned").until == "2"
    assert _by_attr("inner").embedded


def test_private_fields_are_not_exported() -> None:
    """Underscore-prefixed attributes are marked as not exported."""
    assert not _by_attr("_private").exported
    assert _by_attr("plain").exported


def test_handwritten_metadata_is_understood() -> None:
    """Tags written directly into dataclass metadata are parsed the same way."""
    d = _by_attr("handwritten")
    assert d.key == "hw"
    assert d.omit_empty
    assert d.groups == ("a", "b")
    assert d.embedded


def test_field_helper_keeps_foreign_metadata() -> None:
    """Metadata passed to `field()` survives next to the tags."""
    f = field(metadata={"other": 1}, default=0)
    assert f.metadata["other"] == 1
    assert TAG_NAMESPACE in f.metadata


def test_describe_fields_is_cached() -> None:
    """The descriptor table is built once per type."""
    assert describe_fields(Tagged) is describe_fields(Tagged)


@pytest.mark.parametrize(
    "value",
    [None, False, 0, 0.0, Decimal("0"), "", b"", [], (), {}, set()],
)
def test_empty_values(value: object) -> None:
    """Zero values of every kind are empty."""
    assert is_empty_value(value)


@pytest.mark.parametrize(
    "value",
    [True, 1, -0.5, "x", b"x", [0], {"k": None}, Tagged(plain=0, renamed=""), object()],
)
def test_non_empty_values(value: object) -> None:
    """Non-zero values and records are never empty."""
    assert not is_empty_value(value)


def test_handwritten_groups_with_spaces_are_trimmed() -> None:
    """``"a, b"`` in hand-written metadata declares ``a`` and ``b``, not ``" b"``."""

    @dataclass
    class Spaced:
        value: str = dataclasses.field(default="", metadata={TAG_NAMESPACE: {"groups": "a, b"}})

    (desc,) = describe_fields(Spaced)
    assert desc.groups == ("a", "b")
