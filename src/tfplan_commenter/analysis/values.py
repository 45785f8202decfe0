"""Canonical text rendering of untyped plan attribute values."""

from __future__ import annotations

from typing import Any


def _format_number(value: int | float) -> str:
    # JSON does not distinguish 1 from 1.0, so neither do we.
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def stringify(value: Any) -> str:
    """Render *value* to its canonical text form.

    Mappings are rendered with sorted keys and sequences space-separated, so
    two values with the same rendering are considered equal when diffing.
    Strings are rendered raw: ``"1"`` and ``1`` both render as ``1``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return _format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        items = " ".join(f"{k}:{stringify(value[k])}" for k in sorted(value, key=str))
        return f"map[{items}]"
    if isinstance(value, list | tuple):
        return "[" + " ".join(stringify(v) for v in value) + "]"
    return str(value)


def values_equal(a: Any, b: Any) -> bool:
    """Compare two attribute values by their canonical rendering."""
    return stringify(a) == stringify(b)
