"""
Scalar coercion of generic JSON values into display strings.

ensure_string() and ensure_string_array() are total: they accept any value
and never raise. Every string-bearing field of every record passes through
one of them, so nothing but a str ever reaches a rendering surface.
"""

import json
import math
from typing import Any, Dict, List

# Mapping fields tried, in order, before dumping the whole mapping
CONTENT_KEYS = ("text", "value", "description")


def _format_number(value: Any) -> str:
    """Render ints as-is and integral floats without a fractional part (72.0 -> '72')."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return ""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _dump_mapping(value: Dict[str, Any]) -> str:
    """Compact JSON text of a mapping, used when it has no content field."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError, RecursionError):
        return ""


def _content_field(value: Dict[str, Any]) -> Any:
    """Return the first non-null content field, or the sentinel mapping itself."""
    for key in CONTENT_KEYS:
        if value.get(key) is not None:
            return value[key]
    return value


def ensure_string(value: Any) -> str:
    """
    Coerce any JSON value into a single display string.

    - None -> ""
    - str -> itself
    - bool -> "true" / "false"
    - number -> decimal text ("72", "3.5")
    - list -> space-joined strings of its elements, flattened recursively
    - dict -> first non-null of text/value/description, else compact JSON

    Nested lists are flattened with an explicit stack, so arbitrarily deep
    input cannot exhaust the interpreter stack. Never raises.

    Example:
        >>> ensure_string(["a", ["b", 3], None, {"text": "c"}])
        'a b 3  c'
        >>> ensure_string({"foo": "bar"})
        '{"foo":"bar"}'
    """
    parts: List[str] = []
    stack: List[Any] = [value]

    while stack:
        item = stack.pop()

        # Follow content fields until we reach a non-mapping or a mapping without one
        while isinstance(item, dict):
            inner = _content_field(item)
            if inner is item:
                break
            item = inner

        if item is None:
            parts.append("")
        elif isinstance(item, str):
            parts.append(item)
        elif isinstance(item, bool):
            parts.append("true" if item else "false")
        elif isinstance(item, (int, float)):
            parts.append(_format_number(item))
        elif isinstance(item, (list, tuple)):
            if not item:
                parts.append("")
                continue
            # Reverse so elements pop off in original order
            stack.extend(reversed(item))
        elif isinstance(item, dict):
            parts.append(_dump_mapping(item))
        else:
            try:
                parts.append(str(item))
            except Exception:
                parts.append("")

    return " ".join(parts)


def ensure_string_array(value: Any) -> List[str]:
    """
    Coerce a JSON value into a list of display strings.

    Non-list input (None, scalars, mappings) yields []. Lists are coerced
    element-wise with ensure_string, preserving order and length.

    Example:
        >>> ensure_string_array(["a", 1, {"value": "b"}])
        ['a', '1', 'b']
        >>> ensure_string_array({"items": ["a"]})
        []
    """
    if not isinstance(value, (list, tuple)):
        return []
    return [ensure_string(item) for item in value]
