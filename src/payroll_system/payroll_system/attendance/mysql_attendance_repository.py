from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        work_date=r["work_date"],
        in_time=r.get("in_time"),
        out_time=r.get("out_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, staff_id, work_date, in_time, out_time
                FROM attendance_records
                WHERE staff_id=%s AND work_date=%s
                """,
                (int(staff_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_staff(self, *, staff_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, staff_id, work_date, in_time, out_time
                FROM attendance_records
                WHERE staff_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (int(staff_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_in_time(self, *, staff_id: int, work_date: date, in_time: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance_records(staff_id, work_date, in_time) VALUES(%s,%s,%s)",
                (int(staff_id), work_date, in_time),
            )
            return int(cur.lastrowid)

    def update_out_time(self, *, attendance_id: int, out_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_records SET out_time=%s WHERE attendance_id=%s",
                (out_time, int(attendance_id)),
            )
            return cur.rowcount > 0

    def count_present(self, *, staff_id: int, start_date: date, end_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS present_days
                FROM attendance_records
                WHERE staff_id=%s AND work_date BETWEEN %s AND %s AND in_time IS NOT NULL
                """,
                (int(staff_id), start_date, end_date),
            )
            r = fetchone(cur)
            return int(r["present_days"]) if r else 0
