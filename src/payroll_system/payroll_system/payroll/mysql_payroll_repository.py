from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_weekdays, encode_weekdays, fetchall, fetchone
from .model import SalaryRules, SalarySlip
from .repository import SalaryRulesRepository, SalarySlipRepository

# Single organization per database: the rules table holds one row.
_RULES_ROW_ID = 1

_SLIP_COLUMNS = (
    "slip_id, staff_id, staff_name, staff_role, period_year, period_month, total_days, gross_salary, "
    "working_days, present_days, paid_leave_days, unpaid_leave_days, earned_gross, basic, hra, "
    "special_allowance, deductions, lop_deduction, adjustment, net_pay"
)


def _to_slip(r: Dict[str, Any]) -> SalarySlip:
    return SalarySlip(
        slip_id=int(r["slip_id"]),
        staff_id=int(r["staff_id"]),
        staff_name=r["staff_name"],
        staff_role=r.get("staff_role"),
        year=int(r["period_year"]),
        month=int(r["period_month"]),
        total_days=int(r["total_days"]),
        gross_salary=float(r["gross_salary"]),
        working_days=int(r["working_days"]),
        present_days=int(r["present_days"]),
        paid_leave_days=int(r["paid_leave_days"]),
        unpaid_leave_days=int(r["unpaid_leave_days"]),
        earned_gross=float(r["earned_gross"]),
        basic=float(r["basic"]),
        hra=float(r["hra"]),
        special_allowance=float(r["special_allowance"]),
        deductions=float(r["deductions"]),
        lop_deduction=float(r["lop_deduction"]),
        adjustment=float(r["adjustment"]),
        net_pay=float(r["net_pay"]),
    )


class MySQLSalaryRulesRepository(SalaryRulesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SalaryRules]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT basic_percentage, hra_percentage, deduction_percentage, weekly_off_days
                FROM salary_rules
                WHERE rules_id=%s
                """,
                (_RULES_ROW_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SalaryRules(
                basic_percentage=float(r["basic_percentage"]),
                hra_percentage=float(r["hra_percentage"]),
                deduction_percentage=float(r["deduction_percentage"]),
                weekly_off_days=decode_weekdays(r.get("weekly_off_days")),
            )

    def save(self, rules: SalaryRules) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_rules(rules_id, basic_percentage, hra_percentage, deduction_percentage, weekly_off_days)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    basic_percentage=VALUES(basic_percentage),
                    hra_percentage=VALUES(hra_percentage),
                    deduction_percentage=VALUES(deduction_percentage),
                    weekly_off_days=VALUES(weekly_off_days)
                """,
                (
                    _RULES_ROW_ID,
                    rules.basic_percentage,
                    rules.hra_percentage,
                    rules.deduction_percentage,
                    encode_weekdays(rules.weekly_off_days),
                ),
            )


class MySQLSalarySlipRepository(SalarySlipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_period(self, *, year: int, month: int, slips: Sequence[SalarySlip]) -> None:
        # One transaction: a failed insert leaves the previous slips in place.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM salary_slips WHERE period_year=%s AND period_month=%s",
                (int(year), int(month)),
            )
            if not slips:
                return
            cur.executemany(
                """
                INSERT INTO salary_slips(
                    staff_id, staff_name, staff_role, period_year, period_month, total_days, gross_salary,
                    working_days, present_days, paid_leave_days, unpaid_leave_days, earned_gross, basic, hra,
                    special_allowance, deductions, lop_deduction, adjustment, net_pay)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (
                        s.staff_id,
                        s.staff_name,
                        s.staff_role,
                        s.year,
                        s.month,
                        s.total_days,
                        round(s.gross_salary, 2),
                        s.working_days,
                        s.present_days,
                        s.paid_leave_days,
                        s.unpaid_leave_days,
                        round(s.earned_gross, 2),
                        round(s.basic, 2),
                        round(s.hra, 2),
                        round(s.special_allowance, 2),
                        round(s.deductions, 2),
                        round(s.lop_deduction, 2),
                        round(s.adjustment, 2),
                        round(s.net_pay, 2),
                    )
                    for s in slips
                ],
            )

    def list_for_period(self, *, year: int, month: int) -> Sequence[SalarySlip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SLIP_COLUMNS}
                FROM salary_slips
                WHERE period_year=%s AND period_month=%s
                ORDER BY staff_name
                """,
                (int(year), int(month)),
            )
            return [_to_slip(r) for r in fetchall(cur)]

    def list_for_staff(self, *, staff_id: int) -> Sequence[SalarySlip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SLIP_COLUMNS}
                FROM salary_slips
                WHERE staff_id=%s
                ORDER BY period_year DESC, period_month DESC
                """,
                (int(staff_id),),
            )
            return [_to_slip(r) for r in fetchall(cur)]
