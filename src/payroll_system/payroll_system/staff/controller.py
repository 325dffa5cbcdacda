from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, ok
from ..container import Container
from .model import Staff


def staff_to_dict(s: Staff) -> dict:
    return {
        "staff_id": s.staff_id,
        "name": s.name,
        "email": s.email,
        "role": s.role,
        "department": s.department,
        "salary": s.salary,
        "annual_casual_leaves": s.annual_casual_leaves,
        "annual_sick_leaves": s.annual_sick_leaves,
        "status": s.status.value,
        "joining_date": s.joining_date.isoformat() if s.joining_date else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff", methods=["GET"], endpoint="list_staff")
    def list_staff():
        active_only = request.args.get("active", "").lower() in {"1", "true", "yes"}
        return ok([staff_to_dict(s) for s in container.staff_service.list_staff(active_only=active_only)])

    @app.route("/api/staff", methods=["POST"], endpoint="create_staff")
    def create_staff():
        data = json_body()
        joining = data.get("joining_date")
        kwargs = {
            "name": data.get("name", ""),
            "salary": data.get("salary"),
            "email": data.get("email"),
            "role": data.get("role"),
            "department": data.get("department"),
            "joining_date": parse_iso_date(joining) if joining else None,
        }
        for key in ("annual_casual_leaves", "annual_sick_leaves"):
            if key in data:
                kwargs[key] = data[key]
        staff_id = container.staff_service.create_staff(**kwargs)
        return ok(staff_to_dict(container.staff_service.get_staff(staff_id)), status=201)

    @app.route("/api/staff/<int:staff_id>", methods=["GET"], endpoint="get_staff")
    def get_staff(staff_id: int):
        return ok(staff_to_dict(container.staff_service.get_staff(staff_id)))

    @app.route("/api/staff/<int:staff_id>", methods=["PUT"], endpoint="update_staff")
    def update_staff(staff_id: int):
        data = json_body()
        if "joining_date" in data:
            raw = data["joining_date"]
            blank = raw is None or (isinstance(raw, str) and not raw.strip())
            data["joining_date"] = None if blank else parse_iso_date(raw)
        return ok(staff_to_dict(container.staff_service.update_staff(staff_id, **data)))

    @app.route("/api/staff/<int:staff_id>/deactivate", methods=["POST"], endpoint="deactivate_staff")
    def deactivate_staff(staff_id: int):
        return ok(staff_to_dict(container.staff_service.deactivate_staff(staff_id)))
