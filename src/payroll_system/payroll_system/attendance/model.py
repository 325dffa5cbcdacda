from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff member's attendance mark for a day."""

    attendance_id: int
    staff_id: int
    work_date: date
    in_time: Optional[datetime]
    out_time: Optional[datetime] = None

    @property
    def is_present(self) -> bool:
        return self.in_time is not None
