# topmark:header:start
#
#   project      : FieldScope
#   file         : encoders.py
#   file_relpath : src/fieldscope/encoders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Encode marshalled trees to JSON, NDJSON or TOML.

The walker leaves self-describing values (enums, paths, dates, bytes...) in the
tree untouched; the hooks here render them the way the target format expects.

Conventions:
- `to_json()` does not append a trailing newline.
- `to_ndjson()` returns a string that *does* end with a final `\\n`.
- TOML has no `null`, so `None` entries are stripped.
"""

from __future__ import annotations

import base64
import datetime as dt
import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from fieldscope.config.logging import get_logger
from fieldscope.core.formats import OutputFormat
from fieldscope.core.walker import marshal

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from fieldscope.config.logging import FieldscopeLogger
    from fieldscope.core.options import Options

logger: FieldscopeLogger = get_logger(__name__)


def encode_passthrough(value: object) -> object:
    """Render a value the JSON encoder does not know natively.

    Args:
        value (object): A self-describing value left in the tree by the walker.

    Returns:
        object: A JSON-compatible replacement.
    """
    to_json_hook: Any = getattr(value, "__json__", None)
    if callable(to_json_hook):
        return to_json_hook()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


def to_json(node: object, *, indent: int | None = 2) -> str:
    """Serialize a marshalled tree to JSON (no trailing newline).

    Args:
        node (object): The marshalled tree.
        indent (int | None): Indentation; ``None`` renders a single compact line.

    Returns:
        str: The JSON text.
    """
    return json.dumps(node, indent=indent, default=encode_passthrough)


def iter_ndjson(nodes: Iterable[object]) -> Iterator[str]:
    """Serialize each marshalled tree to one compact JSON line (no trailing newline)."""
    for node in nodes:
        yield json.dumps(node, default=encode_passthrough)


def to_ndjson(nodes: Iterable[object]) -> str:
    """Serialize marshalled trees as newline-delimited JSON, ending with a newline."""
    return "".join(f"{line}\n" for line in iter_ndjson(nodes))


def _is_table_like(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, list) and any(
        isinstance(v, Mapping) for v in cast("list[object]", value)
    )


def _toml_ready(value: object) -> object:
    """Strip `None` and render passthrough values for TOML."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _toml_ready(v_any)
        # Plain keys must precede tables in a TOML document.
        return dict(sorted(out.items(), key=lambda kv: _is_table_like(kv[1])))

    if isinstance(value, list):
        out_list: list[object] = []
        for v_any in cast("list[object]", value):
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            out_list.append(_toml_ready(v_any))
        return out_list

    # TOML natively handles datetimes; everything else non-primitive becomes text.
    if isinstance(value, (str, bool, int, float, dt.date, dt.time)):
        return value
    return _toml_ready(encode_passthrough(value))


def to_toml(node: object) -> str:
    """Serialize a marshalled tree to a TOML document.

    Args:
        node (object): The marshalled tree; must be a mapping.

    Returns:
        str: The TOML text.

    Raises:
        ValueError: If `node` is not a mapping (TOML documents are tables).
    """
    if not isinstance(node, Mapping):
        raise ValueError(f"TOML output requires a mapping, got {type(node).__name__}")
    cleaned: Any = _toml_ready(node)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def encode(node: object, fmt: OutputFormat) -> str:
    """Encode a marshalled tree in the given format.

    For NDJSON a top-level list is written one element per line; any other node
    becomes a single line.

    Raises:
        ValueError: If `fmt` is not supported or TOML receives a non-mapping.
    """
    if fmt == OutputFormat.JSON:
        return to_json(node)
    if fmt == OutputFormat.NDJSON:
        return to_ndjson(cast("list[object]", node) if isinstance(node, list) else [node])
    if fmt == OutputFormat.TOML:
        return to_toml(node)
    raise ValueError(f"Unsupported output format: {fmt!r}")


def dumps(options: Options | None, data: object, fmt: OutputFormat = OutputFormat.JSON) -> str:
    """Marshal `data` with `options` and encode the result.

    Args:
        options (Options | None): Visibility options.
        data (object): Value to marshal.
        fmt (OutputFormat): Target format.

    Returns:
        str: The encoded text.
    """
    return encode(marshal(options, data), fmt)
