from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def add_holiday(self, *, holiday_date: date, name: str) -> int:
        name = require_non_empty(name, "Holiday name")
        if self._holidays.get_by_date(holiday_date):
            raise ValidationError(f"A holiday already exists on {holiday_date.isoformat()}")
        return self._holidays.create(holiday_date=holiday_date, name=name)

    def remove_holiday(self, holiday_id: int) -> None:
        if not self._holidays.delete(int(holiday_id)):
            raise NotFoundError(f"Holiday {holiday_id} does not exist")

    def list_holidays(self, *, year: Optional[int] = None) -> Sequence[Holiday]:
        if year is None:
            return self._holidays.list_between()
        return self._holidays.list_between(start_date=date(int(year), 1, 1), end_date=date(int(year), 12, 31))

    def dates_between(self, start: date, end: date) -> frozenset[date]:
        return frozenset(h.holiday_date for h in self._holidays.list_between(start_date=start, end_date=end))
