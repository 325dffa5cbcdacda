from datetime import date

import pytest

from src.payroll_system.payroll_system.core.enums import LeaveType, RequestStatus
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def staff_id(services):
    return services.staff_service.create_staff(
        name="Dev Patel", salary=40000, annual_casual_leaves=3, annual_sick_leaves=6
    )


def _apply(services, staff_id, start, end, leave_type="casual"):
    return services.leave_service.apply_leave(
        staff_id=staff_id,
        leave_type=leave_type,
        start_date=start,
        end_date=end,
        reason="Personal work",
    )


def test_apply_creates_pending_request(services, staff_id):
    rid = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 10))
    req = services.leave_service.get_request(rid)

    assert req.status == RequestStatus.PENDING
    assert req.leave_type == LeaveType.CASUAL


def test_apply_rejects_reversed_range(services, staff_id):
    with pytest.raises(ValidationError):
        _apply(services, staff_id, date(2025, 6, 10), date(2025, 6, 9))


def test_apply_rejects_unknown_leave_type(services, staff_id):
    with pytest.raises(ValidationError):
        _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 9), leave_type="vacation")


def test_apply_requires_reason(services, staff_id):
    with pytest.raises(ValidationError):
        services.leave_service.apply_leave(
            staff_id=staff_id,
            leave_type=LeaveType.SICK,
            start_date=date(2025, 6, 9),
            end_date=date(2025, 6, 9),
            reason="   ",
        )


def test_apply_for_unknown_staff(services):
    with pytest.raises(NotFoundError):
        _apply(services, 42, date(2025, 6, 9), date(2025, 6, 9))


def test_approve_consumes_working_days_only(services, staff_id):
    services.holiday_service.add_holiday(holiday_date=date(2025, 6, 13), name="Local festival")
    # Thu 12 .. Mon 16 June: Fri 13 is a holiday, Sat/Sun are weekly offs
    rid = _apply(services, staff_id, date(2025, 6, 12), date(2025, 6, 16))

    req = services.leave_service.approve_leave(rid, admin_note=" ok ")

    assert req.status == RequestStatus.APPROVED
    assert req.admin_note == "ok"
    assert services.staff_service.get_staff(staff_id).annual_casual_leaves == 1


def test_approve_with_insufficient_balance_keeps_request_pending(services, staff_id):
    rid = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 12))

    with pytest.raises(ValidationError):
        services.leave_service.approve_leave(rid)

    assert services.leave_service.get_request(rid).status == RequestStatus.PENDING
    assert services.staff_service.get_staff(staff_id).annual_casual_leaves == 3


def test_decided_request_cannot_be_decided_again(services, staff_id):
    rid = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 9))
    services.leave_service.reject_leave(rid, admin_note="busy week")

    with pytest.raises(ValidationError):
        services.leave_service.approve_leave(rid)
    with pytest.raises(ValidationError):
        services.leave_service.reject_leave(rid)
    assert services.staff_service.get_staff(staff_id).annual_casual_leaves == 3


def test_approved_grant_splits_types_and_clips_to_period(services, staff_id):
    casual = _apply(services, staff_id, date(2025, 5, 29), date(2025, 6, 3))
    sick = _apply(services, staff_id, date(2025, 6, 18), date(2025, 6, 18), leave_type="SICK")
    rejected = _apply(services, staff_id, date(2025, 6, 20), date(2025, 6, 20))
    services.staff_service.update_staff(staff_id, annual_casual_leaves=10)

    services.leave_service.approve_leave(casual)
    services.leave_service.approve_leave(sick)
    services.leave_service.reject_leave(rejected)

    grant = services.leave_service.approved_grant(
        staff_id,
        date(2025, 6, 1),
        date(2025, 6, 30),
        weekly_off_days={5, 6},
        holiday_dates=set(),
    )

    # May days fall outside the period; June 2 and 3 remain
    assert grant.casual == 2
    assert grant.sick == 1
    assert grant.total == 3


def test_list_requests_filters_by_status(services, staff_id):
    first = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 9))
    _apply(services, staff_id, date(2025, 6, 10), date(2025, 6, 10))
    services.leave_service.reject_leave(first)

    pending = services.leave_service.list_requests(status=RequestStatus.PENDING)
    assert [r.start_date for r in pending] == [date(2025, 6, 10)]


def test_stale_approval_does_not_deduct_twice(services, repos, staff_id, monkeypatch):
    rid = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 9))
    snapshot = repos.leaves.get_by_id(rid)
    # A second approver still holds the PENDING row it read earlier
    monkeypatch.setattr(repos.leaves, "get_by_id", lambda request_id: snapshot)

    services.leave_service.approve_leave(rid)
    with pytest.raises(ValidationError):
        services.leave_service.approve_leave(rid)

    assert repos.leaves.rows[rid].status == RequestStatus.APPROVED
    assert services.staff_service.get_staff(staff_id).annual_casual_leaves == 2


def test_insufficient_balance_reopens_decided_request(services, repos, staff_id):
    rid = _apply(services, staff_id, date(2025, 6, 9), date(2025, 6, 12))

    with pytest.raises(ValidationError):
        services.leave_service.approve_leave(rid, admin_note="fine")

    req = repos.leaves.rows[rid]
    assert req.status == RequestStatus.PENDING
    assert req.admin_note is None
    assert req.decided_at is None
