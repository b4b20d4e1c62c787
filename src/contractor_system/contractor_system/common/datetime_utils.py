from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ParseError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise ParseError(f"Invalid date: {value!r}") from exc


def to_date(value: date | datetime) -> date:
    """Drop the time-of-day part, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
