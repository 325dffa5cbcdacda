from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..staff.repository import StaffRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class AttendanceService:
    """Records attendance marks.

    Face recognition itself happens in an external AI flow; the kiosk calls
    :meth:`mark_present` once a face has been matched to a staff member.
    """

    def __init__(self, attendance: AttendanceRepository, staff: StaffRepository):
        self._attendance = attendance
        self._staff = staff

    def mark_present(self, staff_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        """First mark of the day sets the in-time, the second one the out-time."""
        now = now or now_local()
        today = now.date()

        member = self._staff.get_by_id(int(staff_id))
        if not member:
            raise ValidationError("Staff member does not exist")
        if not member.is_active:
            raise ValidationError("Staff member is inactive")

        existing = self._attendance.get_for_staff_and_date(member.staff_id, today)
        if not existing:
            attendance_id = self._attendance.create_in_time(staff_id=member.staff_id, work_date=today, in_time=now)
            log.debug("staff %s marked in at %s", member.staff_id, now)
            return AttendanceRecord(attendance_id=attendance_id, staff_id=member.staff_id, work_date=today, in_time=now)

        if existing.out_time is not None:
            raise ValidationError("Attendance for today is already complete")

        if not self._attendance.update_out_time(attendance_id=existing.attendance_id, out_time=now):
            raise ValidationError("Failed to record out-time")
        log.debug("staff %s marked out at %s", member.staff_id, now)
        return AttendanceRecord(
            attendance_id=existing.attendance_id,
            staff_id=existing.staff_id,
            work_date=existing.work_date,
            in_time=existing.in_time,
            out_time=now,
        )

    def count_present_days(self, staff_id: int, start: date, end: date) -> int:
        if end < start:
            return 0
        return self._attendance.count_present(staff_id=int(staff_id), start_date=start, end_date=end)

    def list_for_staff(self, staff_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return self._attendance.list_for_staff(staff_id=int(staff_id), start_date=start, end_date=end)
