# topmark:header:start
#
#   project      : FieldScope
#   file         : models.py
#   file_relpath : tests/fixtures/models.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample records shared by tests and used as CLI render targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fieldscope import field


@dataclass
class Address:
    """Postal address; the city is public, the street is not tagged."""

    street: str
    city: str = field(groups="public", default="")


@dataclass
class Audit:
    """Bookkeeping record, usually embedded."""

    created_by: str
    note: str = field(groups="internal", default="")


@dataclass
class Person:
    """A person with grouped, versioned and embedded fields."""

    name: str = field(groups="public")
    email: str = field(groups="admin,support", default="")
    password: str = field(skip=True, default="")
    nickname: str = field(omitempty=True, default="")
    legacy_id: int = field(name="id", until="1.9", default=0)
    handle: str = field(since="2.0", default="")
    address: Address | None = field(groups="admin", default=None)
    audit: Audit | None = field(embedded=True, default=None)
    tags: list[str] = field(groups="public", default_factory=list)


def sample_person() -> Person:
    """Return a fully populated `Person`."""
    return Person(
        name="Ann",
        email="ann@example.org",
        password="hunter2",
        legacy_id=7,
        handle="@ann",
        address=Address(street="1 Main St", city="Springfield"),
        audit=Audit(created_by="root", note="imported"),
        tags=["a", "b"],
    )


sample_people: list[Person] = [
    Person(name="Ann", email="ann@example.org"),
    Person(name="Bob", email="bob@example.org"),
]

bad_keys: dict[Any, str] = {1: "one", 2: "two"}

plain_number: int = 42
