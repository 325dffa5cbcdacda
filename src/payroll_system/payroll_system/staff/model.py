from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import StaffStatus


@dataclass(frozen=True)
class Staff:
    """Domain entity: an employee on the roster."""

    staff_id: int
    name: str
    salary: float
    annual_casual_leaves: int
    annual_sick_leaves: int
    status: StaffStatus = StaffStatus.ACTIVE
    email: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    joining_date: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.status == StaffStatus.ACTIVE
