from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .payroll.calculator.factory import build_calculator
from .payroll.mysql_payroll_repository import MySQLSalaryRulesRepository, MySQLSalarySlipRepository
from .payroll.rules_service import SalaryRulesService
from .payroll.service import PayrollService
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.service import StaffService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    staff_repo: MySQLStaffRepository
    attendance_repo: MySQLAttendanceRepository
    holidays_repo: MySQLHolidayRepository
    leaves_repo: MySQLLeaveRepository
    rules_repo: MySQLSalaryRulesRepository
    slips_repo: MySQLSalarySlipRepository

    staff_service: StaffService
    attendance_service: AttendanceService
    holiday_service: HolidayService
    leave_service: LeaveService
    rules_service: SalaryRulesService
    payroll_service: PayrollService


def build_container(*, db_config: dict, calculator: str = "standard") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    staff_repo = MySQLStaffRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    rules_repo = MySQLSalaryRulesRepository(conn)
    slips_repo = MySQLSalarySlipRepository(conn)

    staff_service = StaffService(staff_repo)
    attendance_service = AttendanceService(attendance_repo, staff_repo)
    holiday_service = HolidayService(holidays_repo)
    rules_service = SalaryRulesService(rules_repo)
    leave_service = LeaveService(leaves_repo, staff_service, holidays_repo, rules_service)
    payroll_service = PayrollService(
        staff_service,
        attendance_service,
        leave_service,
        holiday_service,
        rules_service,
        slips_repo,
        calculator=build_calculator(calculator),
    )

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        leaves_repo=leaves_repo,
        rules_repo=rules_repo,
        slips_repo=slips_repo,
        staff_service=staff_service,
        attendance_service=attendance_service,
        holiday_service=holiday_service,
        leave_service=leave_service,
        rules_service=rules_service,
        payroll_service=payroll_service,
    )
