from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import arg_int, json_body, ok
from ..common.validators import require_finite
from ..container import Container
from ..core.exceptions import ValidationError
from .model import SalaryRules


def rules_to_dict(rules: SalaryRules) -> dict:
    return {
        "basic_percentage": rules.basic_percentage,
        "hra_percentage": rules.hra_percentage,
        "deduction_percentage": rules.deduction_percentage,
        "weekly_off_days": sorted(rules.weekly_off_days),
    }


def register(app: Flask, container: Container) -> None:
    def _period() -> tuple[int, int]:
        today = now_local().date()
        return arg_int("year", today.year), arg_int("month", today.month)

    @app.route("/api/payroll/rules", methods=["GET"], endpoint="get_salary_rules")
    def get_salary_rules():
        return ok(rules_to_dict(container.rules_service.get_rules()))

    @app.route("/api/payroll/rules", methods=["PUT"], endpoint="update_salary_rules")
    def update_salary_rules():
        data = json_body()
        rules = container.rules_service.update_rules(
            basic_percentage=data.get("basic_percentage"),
            hra_percentage=data.get("hra_percentage"),
            deduction_percentage=data.get("deduction_percentage"),
            weekly_off_days=data.get("weekly_off_days"),
        )
        return ok(rules_to_dict(rules))

    @app.route("/api/payroll/salary/<int:staff_id>", methods=["GET"], endpoint="staff_salary")
    def staff_salary(staff_id: int):
        year, month = _period()
        adjustment = require_finite(request.args.get("adjustment") or 0, "adjustment")
        result = container.payroll_service.calculate_for_staff(staff_id, year=year, month=month, adjustment=adjustment)
        return ok(result.to_dict(), year=year, month=month)

    @app.route("/api/payroll/slips", methods=["POST"], endpoint="generate_slips")
    def generate_slips():
        data = json_body()
        today = now_local().date()
        try:
            year = int(data.get("year", today.year))
            month = int(data.get("month", today.month))
            raw_adjustments = {int(k): v for k, v in (data.get("adjustments") or {}).items()}
        except (TypeError, ValueError, AttributeError):
            raise ValidationError("year, month and adjustments must be numeric")
        adjustments = {k: require_finite(v, "adjustment") for k, v in raw_adjustments.items()}

        slips = container.payroll_service.generate_slips(year=year, month=month, adjustments=adjustments)
        return ok([s.to_dict() for s in slips], year=year, month=month, count=len(slips))

    @app.route("/api/payroll/slips", methods=["GET"], endpoint="list_slips")
    def list_slips():
        year, month = _period()
        slips = container.payroll_service.list_slips(year=year, month=month)
        summary = container.payroll_service.summarize(year=year, month=month, slips=slips)
        return ok([s.to_dict() for s in slips], summary=summary.to_dict())

    @app.route("/api/payroll/slips/staff/<int:staff_id>", methods=["GET"], endpoint="staff_slips")
    def staff_slips(staff_id: int):
        return ok([s.to_dict() for s in container.payroll_service.list_slips_for_staff(staff_id)])
