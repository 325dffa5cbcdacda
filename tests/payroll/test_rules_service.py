import pytest

from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.payroll.model import SalaryRules


def test_defaults_when_nothing_saved(services):
    rules = services.rules_service.get_rules()
    assert rules == SalaryRules()
    assert rules.basic_percentage == 40
    assert rules.weekly_off_days == {5, 6}


def test_partial_update_keeps_other_fields(services, repos):
    rules = services.rules_service.update_rules(hra_percentage=25, weekly_off_days=["6"])

    assert rules.basic_percentage == 40
    assert rules.hra_percentage == 25
    assert rules.weekly_off_days == {6}
    assert repos.rules.rules == rules


@pytest.mark.parametrize(
    "changes",
    [
        {"basic_percentage": 101},
        {"deduction_percentage": -5},
        {"basic_percentage": 70, "hra_percentage": 40},
        {"weekly_off_days": [7]},
        {"weekly_off_days": list(range(7))},
    ],
)
def test_invalid_rules_are_rejected(services, repos, changes):
    with pytest.raises(ValidationError):
        services.rules_service.update_rules(**changes)
    assert repos.rules.rules is None
