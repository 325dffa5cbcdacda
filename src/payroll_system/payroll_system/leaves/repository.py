from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(self, *, staff_id: int, leave_type: LeaveType, start_date: date, end_date: date, reason: str) -> int:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        staff_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_overlapping(
        self,
        *,
        staff_id: int,
        start_date: date,
        end_date: date,
        status: RequestStatus = RequestStatus.APPROVED,
    ) -> Sequence[LeaveRequest]:
        """Requests whose [start_date, end_date] intersects the given range."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: RequestStatus, admin_note: Optional[str] = None) -> bool:
        """Move a PENDING request to ``status``; False when it is no longer pending."""

        raise NotImplementedError

    def reopen(self, *, request_id: int) -> bool:
        """Put an APPROVED request back to PENDING, clearing the decision."""

        raise NotImplementedError
