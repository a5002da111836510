"""
Calendar-date helpers.
- Dates cross the API boundary as ISO strings (YYYY-MM-DD).
- The engine never reads the wall clock; only the HTTP layer calls today().
"""
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union
from zoneinfo import ZoneInfo

DateLike = Union[date, str]


def parse_iso_date(value: DateLike) -> date:
    """
    Parse an ISO calendar date (YYYY-MM-DD). date instances pass through.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def iter_dates(from_date: date, to_date: date) -> Iterator[date]:
    """Yield every date from from_date to to_date inclusive, ascending."""
    current = from_date
    while current <= to_date:
        yield current
        current += timedelta(days=1)


def days_inclusive(from_date: date, to_date: date) -> int:
    """Number of calendar days in the closed interval (0 if reversed)."""
    return max((to_date - from_date).days + 1, 0)


def today(tz_name: Optional[str] = None) -> date:
    """Current calendar date, in tz_name when given. Used by the HTTP layer only."""
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()
