from __future__ import annotations

from ..model import SalaryInput
from .base import SalaryCalculator


class CappedSalaryCalculator(SalaryCalculator):
    """Paid days never exceed working days, so earned gross stays <= salary."""

    def days_paid_for(self, inp: SalaryInput, working_days: int) -> int:
        return min(working_days, int(inp.present_days) + int(inp.paid_leave_days))
