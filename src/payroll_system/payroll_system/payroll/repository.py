from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryRules, SalarySlip


class SalaryRulesRepository(Protocol):
    def get(self) -> Optional[SalaryRules]:
        """Stored rules, or None when the organization never saved any."""

        raise NotImplementedError

    def save(self, rules: SalaryRules) -> None:
        raise NotImplementedError


class SalarySlipRepository(Protocol):
    def replace_for_period(self, *, year: int, month: int, slips: Sequence[SalarySlip]) -> None:
        """Drop every slip of the period and store ``slips`` in their place."""

        raise NotImplementedError

    def list_for_period(self, *, year: int, month: int) -> Sequence[SalarySlip]:
        raise NotImplementedError

    def list_for_staff(self, *, staff_id: int) -> Sequence[SalarySlip]:
        """Newest period first."""

        raise NotImplementedError
