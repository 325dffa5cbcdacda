from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.validators import require_percentage, require_weekdays
from ..core.exceptions import ValidationError
from .model import SalaryRules
from .repository import SalaryRulesRepository

log = logging.getLogger(__name__)


class SalaryRulesService:
    def __init__(self, rules: SalaryRulesRepository):
        self._rules = rules

    def get_rules(self) -> SalaryRules:
        return self._rules.get() or SalaryRules()

    def update_rules(
        self,
        *,
        basic_percentage=None,
        hra_percentage=None,
        deduction_percentage=None,
        weekly_off_days: Optional[Iterable] = None,
    ) -> SalaryRules:
        """Partial update; omitted fields keep their current value."""
        current = self.get_rules()

        basic = current.basic_percentage if basic_percentage is None else require_percentage(basic_percentage, "Basic %")
        hra = current.hra_percentage if hra_percentage is None else require_percentage(hra_percentage, "HRA %")
        deduction = (
            current.deduction_percentage
            if deduction_percentage is None
            else require_percentage(deduction_percentage, "Deduction %")
        )
        off_days = current.weekly_off_days if weekly_off_days is None else require_weekdays(weekly_off_days, "Weekly off days")

        # Special allowance is the remainder, so basic + HRA may not exceed the whole.
        if basic + hra > 100:
            raise ValidationError("Basic % and HRA % together must not exceed 100")
        if len(off_days) == 7:
            raise ValidationError("At least one weekday must be a working day")

        rules = SalaryRules(
            basic_percentage=basic,
            hra_percentage=hra,
            deduction_percentage=deduction,
            weekly_off_days=off_days,
        )
        self._rules.save(rules)
        log.info("salary rules updated: %s", rules)
        return rules
