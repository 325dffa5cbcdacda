from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    staff_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: RequestStatus
    created_at: datetime
    decided_at: Optional[datetime] = None
    admin_note: Optional[str] = None


@dataclass(frozen=True)
class LeaveGrant:
    """Approved paid-leave days falling inside a pay period."""

    casual: int = 0
    sick: int = 0

    @property
    def total(self) -> int:
        return self.casual + self.sick
