# topmark:header:start
#
#   project      : FieldScope
#   file         : options.py
#   file_relpath : src/fieldscope/core/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call marshalling options.

`Options` is immutable: one instance is read by every walker function for the
duration of a `marshal()` call. Use `with_overrides()` to derive a variant.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from packaging.version import InvalidVersion, Version

from fieldscope.core.errors import VersionParseError

if TYPE_CHECKING:
    from collections.abc import Iterable


@lru_cache(maxsize=256)
def parse_version(text: str) -> Version:
    """Parse a version string (``"2"``, ``"1.0.0"``, ``"v1.2"``).

    Results are cached per string since the same tag text is parsed for every
    record instance that carries it.

    Args:
        text (str): The version text.

    Returns:
        Version: The parsed version.

    Raises:
        VersionParseError: If `text` is not a well-formed version.
    """
    try:
        return Version(text)
    except InvalidVersion as exc:
        raise VersionParseError(text) from exc


@dataclass(frozen=True)
class Options:
    """Which record fields end up in the marshalled output.

    Attributes:
        groups: Activated group names. A field declaring groups (comma-separated
            ``groups`` tag) is output if one of its groups is listed here.
        api_version: Target version compared against the ``since`` and ``until``
            tags. With a target of ``1.0.0``, a field with ``until="2"`` is output
            while a field with ``since="2"`` is not. ``None`` disables version
            filtering (tags are still validated).
        include_ungrouped: Output fields that declare no groups even when group
            filtering is active. Fields whose groups do not match are still
            dropped.
        inherit_groups: Propagate the groups of a record-typed field to every
            field of that record.
    """

    groups: tuple[str, ...] = ()
    api_version: Version | None = None
    include_ungrouped: bool = False
    inherit_groups: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of names (lists from TOML / Click) but store a tuple.
        if not isinstance(self.groups, tuple):
            object.__setattr__(self, "groups", tuple(self.groups))

    @classmethod
    def create(
        cls,
        *,
        groups: Iterable[str] = (),
        api_version: str | Version | None = None,
        include_ungrouped: bool = False,
        inherit_groups: bool = False,
    ) -> Options:
        """Build options, parsing `api_version` when given as text.

        Raises:
            VersionParseError: If `api_version` is malformed.
        """
        version: Version | None = (
            parse_version(api_version) if isinstance(api_version, str) else api_version
        )
        return cls(
            groups=tuple(groups),
            api_version=version,
            include_ungrouped=include_ungrouped,
            inherit_groups=inherit_groups,
        )

    def with_overrides(self, **changes: Any) -> Options:
        """Return a copy with the given attributes replaced.

        A string ``api_version`` is parsed like in `create()`.
        """
        version = changes.get("api_version")
        if isinstance(version, str):
            changes["api_version"] = parse_version(version)
        return replace(self, **changes)
