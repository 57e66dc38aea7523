"""Date Helpers — parsing request dates, range defaults, human-readable rendering.

Invariants:
    - Every datetime leaving this module is timezone-aware UTC
    - parse_date never raises: unparsable or out-of-range input returns None
    - human_date and its parser use fixed English names, independent of process locale

Design Decisions:
    - Accepts ISO 8601 (date or datetime) and the human_date format itself,
      so dates echoed by the API can be sent back as range bounds
    - Naive input is treated as UTC (ADR: server stores UTC only)
"""

from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (some stores drop tzinfo), convert aware ones."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_date(value: object) -> datetime | None:
    """Parse a request date string; None when absent, empty or unparsable."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        pass
    return _parse_human_date(text)


def _parse_human_date(text: str) -> datetime | None:
    # Inverse of human_date: month names are matched against _MONTHS
    parts = text.split()
    if len(parts) != 4 or parts[1] not in _MONTHS:
        return None
    _, month, day, year = parts
    if not (day.isdecimal() and year.isdecimal()):
        return None
    try:
        return datetime(
            int(year), _MONTHS.index(month) + 1, int(day), tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def date_or_now(value: object) -> datetime:
    """Exercise date default: the creation moment when absent or invalid."""
    return parse_date(value) or utc_now()


def log_range(from_value: object, to_value: object) -> tuple[datetime, datetime]:
    """Inclusive [from, to] bounds for the activity log query."""
    return parse_date(from_value) or EPOCH, parse_date(to_value) or utc_now()


def human_date(dt: datetime) -> str:
    """Render a calendar date without time of day, e.g. "Mon Jan 01 2024"."""
    dt = as_utc(dt)
    return (
        f"{_WEEKDAYS[dt.weekday()]} {_MONTHS[dt.month - 1]} "
        f"{dt.day:02d} {dt.year}"
    )
