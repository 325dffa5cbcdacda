from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import StaffStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Staff
from .repository import StaffRepository

_COLUMNS = (
    "staff_id, name, email, role, department, salary, annual_casual_leaves, "
    "annual_sick_leaves, status, joining_date"
)


def _to_staff(r: Dict[str, Any]) -> Staff:
    return Staff(
        staff_id=int(r["staff_id"]),
        name=r["name"],
        email=r.get("email"),
        role=r.get("role"),
        department=r.get("department"),
        salary=float(r["salary"]),
        annual_casual_leaves=int(r["annual_casual_leaves"]),
        annual_sick_leaves=int(r["annual_sick_leaves"]),
        status=StaffStatus(r["status"]),
        joining_date=r.get("joining_date"),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff WHERE staff_id=%s", (int(staff_id),))
            r = fetchone(cur)
            return _to_staff(r) if r else None

    def list_all(self, *, status: Optional[StaffStatus] = None) -> Sequence[Staff]:
        sql = f"SELECT {_COLUMNS} FROM staff"
        params: tuple = ()
        if status is not None:
            sql += " WHERE status=%s"
            params = (status.value,)
        sql += " ORDER BY name"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_staff(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        salary: float,
        annual_casual_leaves: int,
        annual_sick_leaves: int,
        email: Optional[str] = None,
        role: Optional[str] = None,
        department: Optional[str] = None,
        joining_date: Optional[date] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(name, email, role, department, salary,
                                  annual_casual_leaves, annual_sick_leaves, status, joining_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    name,
                    email,
                    role,
                    department,
                    salary,
                    int(annual_casual_leaves),
                    int(annual_sick_leaves),
                    StaffStatus.ACTIVE.value,
                    joining_date,
                ),
            )
            return int(cur.lastrowid)

    def update(self, staff: Staff) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET name=%s, email=%s, role=%s, department=%s, salary=%s,
                    annual_casual_leaves=%s, annual_sick_leaves=%s, status=%s, joining_date=%s
                WHERE staff_id=%s
                """,
                (
                    staff.name,
                    staff.email,
                    staff.role,
                    staff.department,
                    staff.salary,
                    staff.annual_casual_leaves,
                    staff.annual_sick_leaves,
                    staff.status.value,
                    staff.joining_date,
                    staff.staff_id,
                ),
            )
            return cur.rowcount > 0

    def update_leave_balances(self, *, staff_id: int, annual_casual_leaves: int, annual_sick_leaves: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE staff SET annual_casual_leaves=%s, annual_sick_leaves=%s WHERE staff_id=%s",
                (int(annual_casual_leaves), int(annual_sick_leaves), int(staff_id)),
            )
            return cur.rowcount > 0
