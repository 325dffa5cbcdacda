from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import StaffStatus
from .model import Staff


class StaffRepository(Protocol):
    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[StaffStatus] = None) -> Sequence[Staff]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        salary: float,
        annual_casual_leaves: int,
        annual_sick_leaves: int,
        email: Optional[str] = None,
        role: Optional[str] = None,
        department: Optional[str] = None,
        joining_date: Optional[date] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, staff: Staff) -> bool:
        raise NotImplementedError

    def update_leave_balances(self, *, staff_id: int, annual_casual_leaves: int, annual_sick_leaves: int) -> bool:
        raise NotImplementedError
