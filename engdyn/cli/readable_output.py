"""
Helpers to turn worked-example results into a compact, human-readable
console summary instead of the JSON document.
"""

from __future__ import annotations

from typing import Any


def _fmt_float(value: Any, digits: int = 6, default: str = "n/a") -> str:
    """Safely format a float to a fixed number of significant digits."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return default
    return f"{fval:.{digits}g}"


def _fmt_value(value: Any) -> str:
    """Format a scalar, vector, matrix or expression result."""
    if value is None:
        return "n/a"
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        if value and isinstance(value[0], list):
            rows = ["[" + ", ".join(_fmt_float(c) for c in row) + "]" for row in value]
            return "\n      ".join(rows)
        return "(" + ", ".join(_fmt_value(c) for c in value) + ")"
    return _fmt_float(value)


def format_example(data: dict[str, Any]) -> str:
    """
    Render a worked-example result as plain text.

    Args:
        data: A WorkedExampleResult dumped to a dict
    """
    lines = [
        f"Example {data.get('key', '?')}: {data.get('title', '')}",
        f"  ({data.get('reference', '')})",
    ]
    values = data.get("values") or {}
    width = max((len(name) for name in values), default=0)
    for name, value in values.items():
        lines.append(f"  {name.ljust(width)} = {_fmt_value(value)}")

    notes = data.get("notes") or []
    if notes:
        lines.append("  Notes:")
        for note in notes:
            lines.append(f"    - {note}")
    return "\n".join(lines)

