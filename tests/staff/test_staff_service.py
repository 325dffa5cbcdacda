import pytest

from src.payroll_system.payroll_system.core.enums import LeaveType, StaffStatus
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError


def test_create_staff_applies_default_leave_balances(services):
    sid = services.staff_service.create_staff(name="  Meera  ", salary="32000", department="Sales")
    member = services.staff_service.get_staff(sid)

    assert member.name == "Meera"
    assert member.salary == 32000
    assert member.annual_casual_leaves == 12
    assert member.annual_sick_leaves == 6
    assert member.status == StaffStatus.ACTIVE


@pytest.mark.parametrize("salary", [-1, "abc", None])
def test_create_staff_rejects_bad_salary(services, salary):
    with pytest.raises(ValidationError):
        services.staff_service.create_staff(name="X", salary=salary)


def test_update_staff_rejects_unknown_fields(services):
    sid = services.staff_service.create_staff(name="X", salary=1000)
    with pytest.raises(ValidationError):
        services.staff_service.update_staff(sid, password="secret")


def test_update_staff_changes_salary(services):
    sid = services.staff_service.create_staff(name="X", salary=1000)
    updated = services.staff_service.update_staff(sid, salary=1500)

    assert updated.salary == 1500
    assert services.staff_service.get_staff(sid).salary == 1500


def test_list_staff_active_only(services):
    keep = services.staff_service.create_staff(name="A", salary=1)
    gone = services.staff_service.create_staff(name="B", salary=1)
    services.staff_service.deactivate_staff(gone)

    assert [s.staff_id for s in services.staff_service.list_staff(active_only=True)] == [keep]
    assert len(services.staff_service.list_staff()) == 2


def test_consume_leave_deducts_matching_balance(services):
    sid = services.staff_service.create_staff(name="A", salary=1, annual_casual_leaves=2, annual_sick_leaves=2)

    member = services.staff_service.consume_leave(staff_id=sid, leave_type=LeaveType.SICK, days=2)

    assert member.annual_sick_leaves == 0
    assert member.annual_casual_leaves == 2
    with pytest.raises(ValidationError):
        services.staff_service.consume_leave(staff_id=sid, leave_type=LeaveType.SICK, days=1)


def test_get_missing_staff(services):
    with pytest.raises(NotFoundError):
        services.staff_service.get_staff(7)
