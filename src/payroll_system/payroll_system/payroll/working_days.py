from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterator

from ..common.datetime_utils import iter_dates


def iter_working_days(
    start: date,
    end: date,
    *,
    weekly_off_days: AbstractSet[int],
    holiday_dates: AbstractSet[date],
) -> Iterator[date]:
    """Days in [start, end] that are neither a weekly off nor a holiday."""
    for day in iter_dates(start, end):
        if day.weekday() in weekly_off_days or day in holiday_dates:
            continue
        yield day


def count_working_days(
    start: date,
    end: date,
    *,
    weekly_off_days: AbstractSet[int],
    holiday_dates: AbstractSet[date],
) -> int:
    return sum(1 for _ in iter_working_days(start, end, weekly_off_days=weekly_off_days, holiday_dates=holiday_dates))
