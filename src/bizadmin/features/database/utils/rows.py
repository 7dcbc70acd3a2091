"""Helpers for turning raw database rows into typed values."""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound=Enum)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp column. Naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: Any) -> Optional[date]:
    """Parse a date column; timestamps are truncated to their date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value)
    if len(text) > 10:
        parsed = parse_timestamp(text)
        return parsed.date() if parsed else None
    return date.fromisoformat(text)


def parse_enum(enum_type: Type[E], value: Any, default: Optional[E] = None) -> Optional[E]:
    """Map a stored string onto ``enum_type``; unknown values give ``default``."""
    if value is None:
        return default
    try:
        return enum_type(value)
    except ValueError:
        return default


def day_bounds(day: date) -> Tuple[str, str]:
    """UTC ISO timestamps for the start of ``day`` and the start of the next day."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.fromordinal(day.toordinal() + 1).replace(tzinfo=timezone.utc)
    return start.isoformat(), end.isoformat()


def month_bounds(year: int, month: int) -> Tuple[str, str]:
    """UTC ISO timestamps bracketing a calendar month."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start.isoformat(), end.isoformat()
