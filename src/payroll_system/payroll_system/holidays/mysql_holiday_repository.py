from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _to_holiday(r: Dict[str, Any]) -> Holiday:
    return Holiday(holiday_id=int(r["holiday_id"]), holiday_date=r["holiday_date"], name=r["name"])


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_id, holiday_date, name FROM holidays WHERE holiday_date=%s",
                (holiday_date,),
            )
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def list_between(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Sequence[Holiday]:
        where = []
        params: list = []
        if start_date is not None:
            where.append("holiday_date >= %s")
            params.append(start_date)
        if end_date is not None:
            where.append("holiday_date <= %s")
            params.append(end_date)

        sql = "SELECT holiday_id, holiday_date, name FROM holidays"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY holiday_date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_holiday(r) for r in fetchall(cur)]

    def create(self, *, holiday_date: date, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO holidays(holiday_date, name) VALUES(%s,%s)", (holiday_date, name))
            return int(cur.lastrowid)

    def delete(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0
