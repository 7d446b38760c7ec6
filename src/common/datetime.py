"""Datetime utilities for content dates."""

from datetime import date, datetime, timezone

from dateutil.parser import ParserError, isoparse, parse as parse_date

# Sort key for dates that cannot be parsed; orders them after every real date.
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def parse_content_date(value) -> datetime | None:
    """Parse a front-matter or API date into an aware UTC datetime.

    Accepts ISO-like strings, ``date`` and ``datetime`` objects (YAML decodes
    bare ``2024-01-01`` values into ``date``). Returns None when the value is
    missing or cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError):
            try:
                parsed = parse_date(value)
            except (ParserError, OverflowError, ValueError):
                return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # Offsets at the edge of the calendar cannot be expressed in UTC.
        return None


def effective_date(published, updated=None) -> datetime:
    """Return the later of the published and updated dates.

    Invalid or missing values count as OLDEST, so an entry with no usable
    date sorts last instead of failing the sort.
    """
    published_at = parse_content_date(published) or OLDEST
    updated_at = parse_content_date(updated) or OLDEST
    return max(published_at, updated_at)


def format_date(value) -> str:
    """Render a date value as a string, keeping strings untouched."""
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
