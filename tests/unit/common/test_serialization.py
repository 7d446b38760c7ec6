"""Tests for common.serialization module."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from common.serialization import serialize_dataclass


@dataclass
class SampleData:
    name: str
    value: int


@dataclass
class SampleWithDates:
    name: str
    created_at: datetime
    metadata: dict = field(default_factory=dict)
    history: list = field(default_factory=list)


class TestSerializeDataclass:
    def test_basic_dataclass_to_dict(self) -> None:
        obj = SampleData(name="test", value=42)
        assert serialize_dataclass(obj) == {"name": "test", "value": 42}

    def test_datetime_field_to_iso_string(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        result = serialize_dataclass(SampleWithDates(name="test", created_at=dt))
        assert result["created_at"] == "2024-01-01T12:00:00+00:00"

    def test_nested_dates_converted(self) -> None:
        dt = datetime(2024, 6, 15, 8, 30, 0, tzinfo=timezone.utc)
        obj = SampleWithDates(
            name="test",
            created_at=dt,
            metadata={"published": date(2024, 6, 1), "nested": {"at": dt}},
            history=[dt],
        )
        result = serialize_dataclass(obj)
        assert result["metadata"]["published"] == "2024-06-01"
        assert result["metadata"]["nested"]["at"] == "2024-06-15T08:30:00+00:00"
        assert result["history"] == ["2024-06-15T08:30:00+00:00"]
