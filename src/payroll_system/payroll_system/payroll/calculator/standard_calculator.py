from __future__ import annotations

from ..model import SalaryInput
from .base import SalaryCalculator


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: present + paid leave days, not capped by working days."""

    def days_paid_for(self, inp: SalaryInput, working_days: int) -> int:
        return int(inp.present_days) + int(inp.paid_leave_days)
