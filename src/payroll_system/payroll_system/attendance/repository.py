from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_staff(self, *, staff_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_in_time(self, *, staff_id: int, work_date: date, in_time: datetime) -> int:
        raise NotImplementedError

    def update_out_time(self, *, attendance_id: int, out_time: datetime) -> bool:
        raise NotImplementedError

    def count_present(self, *, staff_id: int, start_date: date, end_date: date) -> int:
        """Number of days in [start_date, end_date] with an in-time."""

        raise NotImplementedError
