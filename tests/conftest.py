from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from types import SimpleNamespace

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.attendance.service import AttendanceService
from src.payroll_system.payroll_system.core.enums import RequestStatus, StaffStatus
from src.payroll_system.payroll_system.holidays.model import Holiday
from src.payroll_system.payroll_system.holidays.service import HolidayService
from src.payroll_system.payroll_system.leaves.model import LeaveRequest
from src.payroll_system.payroll_system.leaves.service import LeaveService
from src.payroll_system.payroll_system.payroll.rules_service import SalaryRulesService
from src.payroll_system.payroll_system.payroll.service import PayrollService
from src.payroll_system.payroll_system.staff.model import Staff
from src.payroll_system.payroll_system.staff.service import StaffService


class FakeStaffRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, Staff] = {}

    def get_by_id(self, staff_id):
        return self.rows.get(int(staff_id))

    def list_all(self, *, status=None):
        rows = sorted(self.rows.values(), key=lambda s: s.name)
        if status is not None:
            rows = [s for s in rows if s.status == status]
        return rows

    def create(self, *, name, salary, annual_casual_leaves, annual_sick_leaves, email=None, role=None, department=None, joining_date=None):
        sid = self._next_id
        self._next_id += 1
        self.rows[sid] = Staff(
            staff_id=sid,
            name=name,
            salary=salary,
            annual_casual_leaves=annual_casual_leaves,
            annual_sick_leaves=annual_sick_leaves,
            status=StaffStatus.ACTIVE,
            email=email,
            role=role,
            department=department,
            joining_date=joining_date,
        )
        return sid

    def update(self, staff):
        if staff.staff_id not in self.rows:
            return False
        self.rows[staff.staff_id] = staff
        return True

    def update_leave_balances(self, *, staff_id, annual_casual_leaves, annual_sick_leaves):
        current = self.rows[int(staff_id)]
        self.rows[int(staff_id)] = replace(
            current,
            annual_casual_leaves=annual_casual_leaves,
            annual_sick_leaves=annual_sick_leaves,
        )
        return True


class FakeAttendanceRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[tuple, AttendanceRecord] = {}

    def get_for_staff_and_date(self, staff_id, work_date):
        return self.rows.get((int(staff_id), work_date))

    def list_for_staff(self, *, staff_id, start_date, end_date):
        return sorted(
            (r for (sid, d), r in self.rows.items() if sid == int(staff_id) and start_date <= d <= end_date),
            key=lambda r: r.work_date,
        )

    def create_in_time(self, *, staff_id, work_date, in_time):
        aid = self._next_id
        self._next_id += 1
        self.rows[(int(staff_id), work_date)] = AttendanceRecord(
            attendance_id=aid, staff_id=int(staff_id), work_date=work_date, in_time=in_time
        )
        return aid

    def update_out_time(self, *, attendance_id, out_time):
        for key, rec in self.rows.items():
            if rec.attendance_id == attendance_id:
                self.rows[key] = replace(rec, out_time=out_time)
                return True
        return False

    def count_present(self, *, staff_id, start_date, end_date):
        return sum(1 for r in self.list_for_staff(staff_id=staff_id, start_date=start_date, end_date=end_date) if r.in_time)


class FakeHolidayRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, Holiday] = {}

    def get_by_date(self, holiday_date):
        return next((h for h in self.rows.values() if h.holiday_date == holiday_date), None)

    def list_between(self, *, start_date=None, end_date=None):
        rows = sorted(self.rows.values(), key=lambda h: h.holiday_date)
        if start_date is not None:
            rows = [h for h in rows if h.holiday_date >= start_date]
        if end_date is not None:
            rows = [h for h in rows if h.holiday_date <= end_date]
        return rows

    def create(self, *, holiday_date, name):
        hid = self._next_id
        self._next_id += 1
        self.rows[hid] = Holiday(holiday_id=hid, holiday_date=holiday_date, name=name)
        return hid

    def delete(self, holiday_id):
        return self.rows.pop(int(holiday_id), None) is not None


class FakeLeaveRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, LeaveRequest] = {}

    def create(self, *, staff_id, leave_type, start_date, end_date, reason):
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = LeaveRequest(
            request_id=rid,
            staff_id=int(staff_id),
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=datetime(2025, 6, 1, 9, 0),
        )
        return rid

    def get_by_id(self, request_id):
        return self.rows.get(int(request_id))

    def list_requests(self, *, status=None, staff_id=None, limit=200):
        rows = [
            r
            for r in self.rows.values()
            if (status is None or r.status == status) and (staff_id is None or r.staff_id == int(staff_id))
        ]
        return rows[:limit]

    def list_overlapping(self, *, staff_id, start_date, end_date, status=RequestStatus.APPROVED):
        return [
            r
            for r in self.rows.values()
            if r.staff_id == int(staff_id) and r.status == status and r.start_date <= end_date and r.end_date >= start_date
        ]

    def decide(self, *, request_id, status, admin_note=None):
        req = self.rows.get(int(request_id))
        if not req or req.status != RequestStatus.PENDING:
            return False
        self.rows[int(request_id)] = replace(
            req, status=status, admin_note=admin_note, decided_at=datetime(2025, 6, 2, 10, 0)
        )
        return True

    def reopen(self, *, request_id):
        req = self.rows.get(int(request_id))
        if not req or req.status != RequestStatus.APPROVED:
            return False
        self.rows[int(request_id)] = replace(req, status=RequestStatus.PENDING, admin_note=None, decided_at=None)
        return True


class FakeRulesRepo:
    def __init__(self, rules=None):
        self.rules = rules

    def get(self):
        return self.rules

    def save(self, rules):
        self.rules = rules


class FakeSlipRepo:
    def __init__(self):
        self.periods: dict[tuple, list] = {}

    def replace_for_period(self, *, year, month, slips):
        self.periods[(int(year), int(month))] = list(slips)

    def list_for_period(self, *, year, month):
        return list(self.periods.get((int(year), int(month)), []))

    def list_for_staff(self, *, staff_id):
        out = [s for slips in self.periods.values() for s in slips if s.staff_id == int(staff_id)]
        return sorted(out, key=lambda s: (s.year, s.month), reverse=True)


@pytest.fixture
def repos():
    return SimpleNamespace(
        staff=FakeStaffRepo(),
        attendance=FakeAttendanceRepo(),
        holidays=FakeHolidayRepo(),
        leaves=FakeLeaveRepo(),
        rules=FakeRulesRepo(),
        slips=FakeSlipRepo(),
    )


@pytest.fixture
def services(repos):
    staff_service = StaffService(repos.staff)
    attendance_service = AttendanceService(repos.attendance, repos.staff)
    holiday_service = HolidayService(repos.holidays)
    rules_service = SalaryRulesService(repos.rules)
    leave_service = LeaveService(repos.leaves, staff_service, repos.holidays, rules_service)
    payroll_service = PayrollService(
        staff_service,
        attendance_service,
        leave_service,
        holiday_service,
        rules_service,
        repos.slips,
    )
    return SimpleNamespace(
        staff_service=staff_service,
        attendance_service=attendance_service,
        holiday_service=holiday_service,
        rules_service=rules_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
    )
