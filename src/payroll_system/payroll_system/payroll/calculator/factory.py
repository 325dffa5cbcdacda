from __future__ import annotations

from ...core.enums import CalculatorKind
from ...core.exceptions import ValidationError
from .base import SalaryCalculator
from .capped_calculator import CappedSalaryCalculator
from .standard_calculator import StandardSalaryCalculator


def build_calculator(kind: str | CalculatorKind = CalculatorKind.STANDARD) -> SalaryCalculator:
    """Factory Pattern: pick the salary strategy named in settings."""
    try:
        kind = CalculatorKind(str(getattr(kind, "value", kind)).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown payroll calculator {kind!r}")

    if kind == CalculatorKind.CAPPED:
        return CappedSalaryCalculator()
    return StandardSalaryCalculator()
