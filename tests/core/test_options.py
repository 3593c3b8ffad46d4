# topmark:header:start
#
#   project      : FieldScope
#   file         : test_options.py
#   file_relpath : tests/core/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options construction and version parsing."""

from __future__ import annotations

import dataclasses

import pytest
from packaging.version import Version

from fieldscope.core.errors import FieldscopeError, VersionParseError
from fieldscope.core.options import Options, parse_version


def test_defaults_disable_all_filtering() -> None:
    """Default options activate nothing and set no target version."""
    opts = Options()
    assert opts.groups == ()
    assert opts.api_version is None
    assert not opts.include_ungrouped
    assert not opts.inherit_groups


def test_groups_are_stored_as_tuple() -> None:
    """Any iterable of group names is normalized to a tuple."""
    opts = Options(groups=["a", "b"])  # type: ignore[arg-type]
    assert opts.groups == ("a", "b")


def test_options_are_immutable() -> None:
    """Options cannot be mutated during a call."""
    opts = Options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.include_ungrouped = True  # type: ignore[misc]


def test_create_parses_version_text() -> None:
    """`create` accepts the target version as text."""
    opts = Options.create(groups=["admin"], api_version="1.2.0", inherit_groups=True)
    assert opts.api_version == Version("1.2.0")
    assert opts.groups == ("admin",)
    assert opts.inherit_groups


def test_create_rejects_malformed_version() -> None:
    """A malformed target version raises VersionParseError."""
    with pytest.raises(VersionParseError) as excinfo:
        Options.create(api_version="one point two")
    assert excinfo.value.value == "one point two"
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, FieldscopeError)


def test_with_overrides_returns_modified_copy() -> None:
    """`with_overrides` leaves the original untouched and parses version text."""
    base = Options.create(groups=["a"])
    derived = base.with_overrides(api_version="2", include_ungrouped=True)
    assert base.api_version is None
    assert derived.api_version == Version("2")
    assert derived.include_ungrouped
    assert derived.groups == ("a",)


@pytest.mark.parametrize("text", ["2", "1.0.0", "v1.2", "3.1rc1"])
def test_parse_version_accepts_common_forms(text: str) -> None:
    """Short, full, prefixed and pre-release versions parse."""
    assert isinstance(parse_version(text), Version)


def test_parse_version_compares_numerically() -> None:
    """Versions compare numerically, not lexically."""
    assert parse_version("1.10") > parse_version("1.9")
    assert parse_version("2") == parse_version("2.0.0")
