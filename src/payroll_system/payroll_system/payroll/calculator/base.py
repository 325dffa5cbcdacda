from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import SalaryInput, SalaryResult, SalaryRules
from ..working_days import count_working_days


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations are pure: no I/O, no exceptions, same input -> same result.
    """

    def calculate(self, inp: SalaryInput, rules: SalaryRules) -> SalaryResult:
        working_days = count_working_days(
            inp.month_start,
            inp.month_end,
            weekly_off_days=inp.weekly_off_days,
            holiday_dates=inp.holiday_dates,
        )
        days_paid_for = self.days_paid_for(inp, working_days)
        unpaid_leave_days = max(0, working_days - days_paid_for)

        if working_days > 0:
            earned_gross = (inp.employee_salary / working_days) * days_paid_for
        else:
            earned_gross = 0.0

        basic = earned_gross * rules.basic_percentage / 100
        hra = earned_gross * rules.hra_percentage / 100
        special_allowance = max(0.0, earned_gross - basic - hra)
        deductions = earned_gross * rules.deduction_percentage / 100
        net_pay = earned_gross - deductions + inp.adjustment

        return SalaryResult(
            working_days=working_days,
            present_days=inp.present_days,
            paid_leave_days=inp.paid_leave_days,
            unpaid_leave_days=unpaid_leave_days,
            earned_gross=earned_gross,
            basic=basic,
            hra=hra,
            special_allowance=special_allowance,
            deductions=deductions,
            adjustment=inp.adjustment,
            net_pay=net_pay,
        )

    @abstractmethod
    def days_paid_for(self, inp: SalaryInput, working_days: int) -> int:
        raise NotImplementedError
