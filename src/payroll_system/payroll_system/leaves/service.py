from __future__ import annotations

import logging
from datetime import date
from typing import AbstractSet, Optional, Sequence

from ..common.datetime_utils import overlap
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveType, RequestStatus
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..holidays.repository import HolidayRepository
from ..payroll.rules_service import SalaryRulesService
from ..payroll.working_days import count_working_days
from ..staff.service import StaffService
from .model import LeaveGrant, LeaveRequest
from .repository import LeaveRepository

log = logging.getLogger(__name__)


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        staff: StaffService,
        holidays: HolidayRepository,
        rules: SalaryRulesService,
    ):
        self._leaves = leaves
        self._staff = staff
        self._holidays = holidays
        self._rules = rules

    def apply_leave(
        self,
        *,
        staff_id: int,
        leave_type: LeaveType | str,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        member = self._staff.get_staff(staff_id)
        if not member.is_active:
            raise ValidationError("Inactive staff cannot apply for leave")

        try:
            leave_type = LeaveType(str(getattr(leave_type, "value", leave_type)).upper())
        except ValueError:
            raise ValidationError(f"Unknown leave type {leave_type!r}")

        if end_date < start_date:
            raise ValidationError("End date must not be before start date")
        reason = require_non_empty(reason, "Reason")

        return self._leaves.create(
            staff_id=member.staff_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
        )

    def get_request(self, request_id: int) -> LeaveRequest:
        req = self._leaves.get_by_id(int(request_id))
        if not req:
            raise NotFoundError(f"Leave request {request_id} does not exist")
        return req

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        staff_id: Optional[int] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[LeaveRequest]:
        return self._leaves.list_requests(status=status, staff_id=staff_id, limit=limit)

    def leave_days(self, req: LeaveRequest) -> int:
        """Working days covered by a request; weekly offs and holidays are free."""
        rules = self._rules.get_rules()
        holiday_dates = self._holiday_dates(req.start_date, req.end_date)
        return count_working_days(
            req.start_date,
            req.end_date,
            weekly_off_days=rules.weekly_off_days,
            holiday_dates=holiday_dates,
        )

    def approve_leave(self, request_id: int, *, admin_note: str = "") -> LeaveRequest:
        req = self.get_request(request_id)
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")

        days = self.leave_days(req)

        # The conditional decide is the guard: only one approver can win it.
        decided = self._leaves.decide(
            request_id=req.request_id,
            status=RequestStatus.APPROVED,
            admin_note=(admin_note or "").strip() or None,
        )
        if not decided:
            raise ValidationError("Leave request has already been decided")

        if days > 0:
            try:
                self._staff.consume_leave(staff_id=req.staff_id, leave_type=req.leave_type, days=days)
            except DomainError:
                self._leaves.reopen(request_id=req.request_id)
                raise

        log.info("leave request %s approved (%s day(s) of %s)", req.request_id, days, req.leave_type.value)
        return self.get_request(req.request_id)

    def reject_leave(self, request_id: int, *, admin_note: str = "") -> LeaveRequest:
        req = self.get_request(request_id)
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")

        decided = self._leaves.decide(
            request_id=req.request_id,
            status=RequestStatus.REJECTED,
            admin_note=(admin_note or "").strip() or None,
        )
        if not decided:
            raise ValidationError("Failed to reject leave request")

        log.info("leave request %s rejected", req.request_id)
        return self.get_request(req.request_id)

    def approved_grant(
        self,
        staff_id: int,
        start: date,
        end: date,
        *,
        weekly_off_days: AbstractSet[int],
        holiday_dates: AbstractSet[date],
    ) -> LeaveGrant:
        """Approved leave days inside [start, end], split by leave type."""
        casual = 0
        sick = 0
        for req in self._leaves.list_overlapping(staff_id=int(staff_id), start_date=start, end_date=end):
            span = overlap(req.start_date, req.end_date, start, end)
            if span is None:
                continue
            days = count_working_days(span[0], span[1], weekly_off_days=weekly_off_days, holiday_dates=holiday_dates)
            if req.leave_type == LeaveType.CASUAL:
                casual += days
            else:
                sick += days
        return LeaveGrant(casual=casual, sick=sick)

    def _holiday_dates(self, start: date, end: date) -> frozenset[date]:
        return frozenset(h.holiday_date for h in self._holidays.list_between(start_date=start, end_date=end))
