from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month {month!r}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield each day in [start, end]; nothing when end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> tuple[date, date] | None:
    start = max(start_a, start_b)
    end = min(end_a, end_b)
    if end < start:
        return None
    return start, end
