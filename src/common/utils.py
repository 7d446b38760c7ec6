"""Common utility functions."""

from typing import Any, Mapping


def first_value(mapping: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-empty value found under any of the given keys."""
    for key in keys:
        value = mapping.get(key)
        if value is not None and value != "":
            return value
    return None


def to_float(value: Any) -> float | None:
    """Coerce a rating or price to float, returning None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
