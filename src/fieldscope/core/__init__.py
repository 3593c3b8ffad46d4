# topmark:header:start
#
#   project      : FieldScope
#   file         : __init__.py
#   file_relpath : src/fieldscope/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core marshalling engine.

Included modules:

- ``group_set``
  Reference-counted multiset of group names tracking active scopes.

- ``options``
  Immutable per-call options and version parsing.

- ``tags``
  Field tags and cached per-type field descriptor tables.

- ``classify``
  Value classification (self-serializing, self-describing, record, sequence,
  mapping, scalar) and the `Marshaller` protocol.

- ``walker``
  The recursive object/value walker behind `marshal()`.

- ``errors``
  Exception hierarchy.

This package has no CLI or encoder dependencies.
"""

from __future__ import annotations
