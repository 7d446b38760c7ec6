"""Serialization utilities."""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, converting dates to ISO strings at any depth."""
    return _serialize_value(asdict(obj))


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    return value
