# topmark:header:start
#
#   project      : FieldScope
#   file         : target.py
#   file_relpath : src/fieldscope/cli/target.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve ``module:attr`` render targets."""

from __future__ import annotations

import importlib

from fieldscope.cli.errors import FieldscopeTargetError, FieldscopeUsageError
from fieldscope.config.logging import get_logger

logger = get_logger(__name__)


def resolve_target(spec: str) -> object:
    """Import ``module:attr`` and return the value it names.

    `attr` may be dotted (``module:Class.attribute``). A callable result is called
    with no arguments and its return value used instead, so factories and
    dataclasses whose fields all have defaults can be rendered directly.

    Args:
        spec (str): The target specification.

    Returns:
        object: The value to marshal.

    Raises:
        FieldscopeUsageError: If `spec` is not of the form ``module:attr``.
        FieldscopeTargetError: If the module or attribute cannot be resolved, or
            calling the factory fails.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise FieldscopeUsageError(f"Target must look like 'module:attr', got {spec!r}")

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise FieldscopeTargetError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise FieldscopeTargetError(f"{spec!r}: no attribute {part!r}") from exc

    if callable(obj):
        logger.debug("Calling factory %s", spec)
        try:
            return obj()
        except TypeError as exc:
            raise FieldscopeTargetError(f"Cannot call {spec!r} without arguments: {exc}") from exc
    return obj
