from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import AbstractSet, Optional

from ..core.constants import (
    DEFAULT_BASIC_PERCENTAGE,
    DEFAULT_DEDUCTION_PERCENTAGE,
    DEFAULT_HRA_PERCENTAGE,
    DEFAULT_WEEKLY_OFF_DAYS,
)


@dataclass(frozen=True)
class SalaryRules:
    """Organization-wide salary split and calendar rules.

    Percentages are 0-100. ``weekly_off_days`` holds Python weekday numbers
    (Monday=0 ... Sunday=6).
    """

    basic_percentage: float = DEFAULT_BASIC_PERCENTAGE
    hra_percentage: float = DEFAULT_HRA_PERCENTAGE
    deduction_percentage: float = DEFAULT_DEDUCTION_PERCENTAGE
    weekly_off_days: frozenset[int] = field(default_factory=lambda: frozenset(DEFAULT_WEEKLY_OFF_DAYS))


@dataclass(frozen=True)
class SalaryInput:
    """Everything one salary computation needs, already gathered."""

    month_start: date
    month_end: date
    employee_salary: float
    present_days: int
    paid_leave_days: int
    weekly_off_days: AbstractSet[int] = frozenset(DEFAULT_WEEKLY_OFF_DAYS)
    holiday_dates: AbstractSet[date] = frozenset()
    adjustment: float = 0.0


@dataclass(frozen=True)
class SalaryResult:
    working_days: int
    present_days: int
    paid_leave_days: int
    unpaid_leave_days: int
    earned_gross: float
    basic: float
    hra: float
    special_allowance: float
    deductions: float
    adjustment: float
    net_pay: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SalarySlip:
    staff_id: int
    staff_name: str
    staff_role: Optional[str]
    year: int
    month: int
    total_days: int
    gross_salary: float
    working_days: int
    present_days: int
    paid_leave_days: int
    unpaid_leave_days: int
    earned_gross: float
    basic: float
    hra: float
    special_allowance: float
    deductions: float
    lop_deduction: float
    adjustment: float
    net_pay: float
    slip_id: Optional[int] = None

    @property
    def total_earnings(self) -> float:
        return self.basic + self.hra + self.special_allowance

    def to_dict(self) -> dict:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, float):
                data[key] = round(value, 2)
        data["total_earnings"] = round(self.total_earnings, 2)
        return data
