# topmark:header:start
#
#   project      : FieldScope
#   file         : group_set.py
#   file_relpath : src/fieldscope/core/group_set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reference-counted multiset of group names.

The walker keeps two of these per call:

- the *activation* set, seeded once from `Options.groups` and never mutated;
- the *parents* set, pushed before descending into a field and popped after it,
  tracking which groups the current recursion path inherited.

Counting (instead of a plain `set`) lets the same group be pushed at several depths:
popping one scope leaves the group active for any enclosing scope that also pushed it.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class GroupSet:
    """Multiset of group names; a name is active while its count is positive.

    `push()` and `pop()` must be called in matching pairs with the same names.
    This is not enforced; prefer `scoped()` which guarantees the pairing.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    @classmethod
    def from_names(cls, names: Iterable[str]) -> GroupSet:
        """Return a set with every name in `names` pushed once."""
        gs = cls()
        gs.push(names)
        return gs

    def push(self, names: Iterable[str]) -> None:
        """Increment the count of every name in `names`."""
        for name in names:
            self._counts[name] = self._counts.get(name, 0) + 1

    def pop(self, names: Iterable[str]) -> None:
        """Decrement the count of every name in `names`."""
        for name in names:
            self._counts[name] = self._counts.get(name, 0) - 1

    @contextmanager
    def scoped(self, names: Iterable[str]) -> Iterator[None]:
        """Push `names` for the duration of the `with` block.

        The names are popped again on exit, including when the body raises.
        """
        frozen: tuple[str, ...] = tuple(names)
        self.push(frozen)
        try:
            yield
        finally:
            self.pop(frozen)

    def contains(self, name: str) -> bool:
        """Return True if `name` is active (count > 0)."""
        return self._counts.get(name, 0) > 0

    def contains_any(self, names: Iterable[str]) -> bool:
        """Return True if any name in `names` is active."""
        return any(self.contains(name) for name in names)

    def count(self, name: str) -> int:
        """Return the current count for `name` (0 if never pushed)."""
        return self._counts.get(name, 0)

    def active(self) -> frozenset[str]:
        """Return the names that are currently active."""
        return frozenset(name for name, n in self._counts.items() if n > 0)

    def __len__(self) -> int:
        return sum(1 for n in self._counts.values() if n > 0)

    def __bool__(self) -> bool:
        return any(n > 0 for n in self._counts.values())

    def __repr__(self) -> str:
        active = ", ".join(f"{k}={v}" for k, v in sorted(self._counts.items()) if v > 0)
        return f"GroupSet({active})"
