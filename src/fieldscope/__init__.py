# topmark:header:start
#
#   project      : FieldScope
#   file         : __init__.py
#   file_relpath : src/fieldscope/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FieldScope package.

FieldScope marshals dataclass records into plain ``dict`` / ``list`` trees for
JSON, NDJSON or TOML encoding, filtering fields per call by activated groups,
target API version and structural embedding.

Example:
    ```python
    from dataclasses import dataclass

    from fieldscope import Options, field, marshal

    @dataclass
    class User:
        name: str
        email: str = field(groups="admin")

    marshal(None, User("ann", "a@x"))
    # {'name': 'ann', 'email': 'a@x'}
    marshal(Options.create(groups=["admin"]), User("ann", "a@x"))
    # {'email': 'a@x'}
    marshal(Options.create(include_ungrouped=True), User("ann", "a@x"))
    # {'name': 'ann'}
    ```
"""

from __future__ import annotations

from fieldscope.core.classify import (
    Marshaller,
    ValueKind,
    classify,
    register_self_describing,
    unregister_self_describing,
)
from fieldscope.core.errors import FieldscopeError, InvalidInputTypeError, VersionParseError
from fieldscope.core.formats import OutputFormat
from fieldscope.core.group_set import GroupSet
from fieldscope.core.options import Options, parse_version
from fieldscope.core.tags import FieldDescriptor, describe_fields, field
from fieldscope.core.walker import marshal
from fieldscope.encoders import dumps, encode, to_json, to_ndjson, to_toml

__all__ = [
    "FieldDescriptor",
    "FieldscopeError",
    "GroupSet",
    "InvalidInputTypeError",
    "Marshaller",
    "Options",
    "OutputFormat",
    "ValueKind",
    "VersionParseError",
    "classify",
    "describe_fields",
    "dumps",
    "encode",
    "field",
    "marshal",
    "parse_version",
    "register_self_describing",
    "to_json",
    "to_ndjson",
    "to_toml",
    "unregister_self_describing",
]
