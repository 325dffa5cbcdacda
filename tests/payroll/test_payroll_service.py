from datetime import date, datetime, time

import pytest

from src.payroll_system.payroll_system.core.enums import LeaveType
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError
from src.payroll_system.payroll_system.payroll.calculator.capped_calculator import CappedSalaryCalculator
from src.payroll_system.payroll_system.payroll.model import SalaryRules
from src.payroll_system.payroll_system.payroll.service import PayrollService
from src.payroll_system.payroll_system.payroll.working_days import iter_working_days

SUNDAY_ONLY = frozenset({6})


def _mark_days(services, staff_id, days):
    for d in days:
        services.attendance_service.mark_present(staff_id, now=datetime.combine(d, time(9, 0)))


@pytest.fixture
def staffed(repos, services):
    repos.rules.rules = SalaryRules(
        basic_percentage=40, hra_percentage=20, deduction_percentage=5, weekly_off_days=SUNDAY_ONLY
    )
    sid = services.staff_service.create_staff(name="Asha Rao", salary=50000, role="Accountant")

    # 2 approved casual days on Mon 2 and Tue 3 June
    rid = services.leave_service.apply_leave(
        staff_id=sid,
        leave_type=LeaveType.CASUAL,
        start_date=date(2025, 6, 2),
        end_date=date(2025, 6, 3),
        reason="Family function",
    )
    services.leave_service.approve_leave(rid)

    days = list(iter_working_days(date(2025, 6, 4), date(2025, 6, 30), weekly_off_days=SUNDAY_ONLY, holiday_dates=set()))
    _mark_days(services, sid, days[:20])
    return sid


def test_calculate_for_staff_gathers_attendance_and_leave(services, staffed):
    result = services.payroll_service.calculate_for_staff(staffed, year=2025, month=6)

    assert result.working_days == 25
    assert result.present_days == 20
    assert result.paid_leave_days == 2
    assert result.unpaid_leave_days == 3
    assert result.earned_gross == pytest.approx(44000)
    assert result.net_pay == pytest.approx(41800)


def test_holiday_is_not_a_working_day(services, staffed):
    services.holiday_service.add_holiday(holiday_date=date(2025, 6, 30), name="Founders Day")
    result = services.payroll_service.calculate_for_staff(staffed, year=2025, month=6)
    assert result.working_days == 24


def test_unknown_staff_raises_not_found(services):
    with pytest.raises(NotFoundError):
        services.payroll_service.calculate_for_staff(99, year=2025, month=6)


def test_invalid_month_is_rejected(services, staffed):
    with pytest.raises(ValidationError):
        services.payroll_service.calculate_for_staff(staffed, year=2025, month=13)


def test_generate_slips_skips_inactive_staff_and_applies_adjustments(services, staffed):
    other = services.staff_service.create_staff(name="Ben Thomas", salary=30000)
    services.staff_service.deactivate_staff(other)

    slips = services.payroll_service.generate_slips(year=2025, month=6, adjustments={staffed: 1500})

    assert len(slips) == 1
    slip = slips[0]
    assert slip.staff_id == staffed
    assert slip.staff_name == "Asha Rao"
    assert slip.staff_role == "Accountant"
    assert slip.total_days == 30
    assert slip.gross_salary == 50000
    assert slip.lop_deduction == pytest.approx(6000)
    assert slip.adjustment == 1500
    assert slip.net_pay == pytest.approx(43300)
    assert slip.total_earnings == pytest.approx(slip.earned_gross)


def test_regenerating_a_period_replaces_its_slips(services, staffed, repos):
    services.payroll_service.generate_slips(year=2025, month=6)
    services.payroll_service.generate_slips(year=2025, month=6, adjustments={staffed: -200})

    stored = services.payroll_service.list_slips(year=2025, month=6)
    assert len(stored) == 1
    assert stored[0].adjustment == -200
    assert len(services.payroll_service.list_slips_for_staff(staffed)) == 1


def test_summarize_totals_period(services, staffed):
    services.staff_service.create_staff(name="Chitra Iyer", salary=25000)
    services.payroll_service.generate_slips(year=2025, month=6)

    summary = services.payroll_service.summarize(year=2025, month=6)

    assert summary.slip_count == 2
    # Chitra has no attendance: nothing earned
    assert summary.total_earned_gross == pytest.approx(44000)
    assert summary.total_net_pay == pytest.approx(41800)
    assert summary.to_dict()["total_deductions"] == 2200


def test_capped_calculator_can_be_injected(repos, services, staffed):
    services.attendance_service.mark_present(staffed, now=datetime(2025, 6, 2, 9, 0))
    payroll = PayrollService(
        services.staff_service,
        services.attendance_service,
        services.leave_service,
        services.holiday_service,
        services.rules_service,
        repos.slips,
        calculator=CappedSalaryCalculator(),
    )
    days = list(iter_working_days(date(2025, 6, 1), date(2025, 6, 30), weekly_off_days=SUNDAY_ONLY, holiday_dates=set()))
    _mark_days(services, staffed, [d for d in days[20:] if d > date(2025, 6, 3)])

    result = payroll.calculate_for_staff(staffed, year=2025, month=6)
    assert result.present_days + result.paid_leave_days > result.working_days
    assert result.earned_gross == pytest.approx(50000)
