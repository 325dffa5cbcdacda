from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..attendance.service import AttendanceService
from ..common.datetime_utils import month_bounds
from ..common.validators import require_finite
from ..holidays.service import HolidayService
from ..leaves.service import LeaveService
from ..staff.model import Staff
from ..staff.service import StaffService
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryInput, SalaryResult, SalarySlip
from .repository import SalarySlipRepository
from .rules_service import SalaryRulesService

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollSummary:
    year: int
    month: int
    slip_count: int
    total_earned_gross: float
    total_deductions: float
    total_net_pay: float

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "slip_count": self.slip_count,
            "total_earned_gross": round(self.total_earned_gross, 2),
            "total_deductions": round(self.total_deductions, 2),
            "total_net_pay": round(self.total_net_pay, 2),
        }


class PayrollService:
    """Gathers attendance, leave, holiday and rule inputs for the calculator."""

    def __init__(
        self,
        staff: StaffService,
        attendance: AttendanceService,
        leaves: LeaveService,
        holidays: HolidayService,
        rules: SalaryRulesService,
        slips: SalarySlipRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._leaves = leaves
        self._holidays = holidays
        self._rules = rules
        self._slips = slips
        self._calculator = calculator or StandardSalaryCalculator()

    def calculate_for_staff(self, staff_id: int, *, year: int, month: int, adjustment: float = 0.0) -> SalaryResult:
        member = self._staff.get_staff(staff_id)
        return self._calculate(member, year=year, month=month, adjustment=adjustment)

    def generate_slips(
        self,
        *,
        year: int,
        month: int,
        adjustments: Optional[Mapping[int, float]] = None,
    ) -> Sequence[SalarySlip]:
        """Compute slips for every active staff member and replace the period's slips."""
        adjustments = {int(k): require_finite(v, "adjustment") for k, v in (adjustments or {}).items()}
        start, end = month_bounds(year, month)

        slips = []
        for member in self._staff.list_staff(active_only=True):
            result = self._calculate(member, year=year, month=month, adjustment=adjustments.get(member.staff_id, 0.0))
            per_day = member.salary / result.working_days if result.working_days > 0 else 0.0
            slips.append(
                SalarySlip(
                    staff_id=member.staff_id,
                    staff_name=member.name,
                    staff_role=member.role,
                    year=int(year),
                    month=int(month),
                    total_days=(end - start).days + 1,
                    gross_salary=member.salary,
                    working_days=result.working_days,
                    present_days=result.present_days,
                    paid_leave_days=result.paid_leave_days,
                    unpaid_leave_days=result.unpaid_leave_days,
                    earned_gross=result.earned_gross,
                    basic=result.basic,
                    hra=result.hra,
                    special_allowance=result.special_allowance,
                    deductions=result.deductions,
                    lop_deduction=result.unpaid_leave_days * per_day,
                    adjustment=result.adjustment,
                    net_pay=result.net_pay,
                )
            )

        self._slips.replace_for_period(year=int(year), month=int(month), slips=slips)
        log.info("generated %d salary slip(s) for %04d-%02d", len(slips), int(year), int(month))
        return slips

    def list_slips(self, *, year: int, month: int) -> Sequence[SalarySlip]:
        month_bounds(year, month)
        return self._slips.list_for_period(year=int(year), month=int(month))

    def list_slips_for_staff(self, staff_id: int) -> Sequence[SalarySlip]:
        member = self._staff.get_staff(staff_id)
        return self._slips.list_for_staff(staff_id=member.staff_id)

    def summarize(self, *, year: int, month: int, slips: Optional[Sequence[SalarySlip]] = None) -> PayrollSummary:
        if slips is None:
            slips = self.list_slips(year=year, month=month)
        return PayrollSummary(
            year=int(year),
            month=int(month),
            slip_count=len(slips),
            total_earned_gross=sum(s.earned_gross for s in slips),
            total_deductions=sum(s.deductions for s in slips),
            total_net_pay=sum(s.net_pay for s in slips),
        )

    def _calculate(self, member: Staff, *, year: int, month: int, adjustment: float) -> SalaryResult:
        start, end = month_bounds(year, month)
        rules = self._rules.get_rules()
        holiday_dates = self._holidays.dates_between(start, end)

        present_days = self._attendance.count_present_days(member.staff_id, start, end)
        grant = self._leaves.approved_grant(
            member.staff_id,
            start,
            end,
            weekly_off_days=rules.weekly_off_days,
            holiday_dates=holiday_dates,
        )

        inp = SalaryInput(
            month_start=start,
            month_end=end,
            employee_salary=member.salary,
            present_days=present_days,
            paid_leave_days=grant.total,
            weekly_off_days=rules.weekly_off_days,
            holiday_dates=holiday_dates,
            adjustment=require_finite(adjustment or 0.0, "adjustment"),
        )
        return self._calculator.calculate(inp, rules)
