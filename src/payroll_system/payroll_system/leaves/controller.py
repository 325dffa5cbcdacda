from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import arg_int, json_body, ok
from ..container import Container
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from .model import LeaveRequest


def leave_to_dict(r: LeaveRequest) -> dict:
    return {
        "request_id": r.request_id,
        "staff_id": r.staff_id,
        "leave_type": r.leave_type.value,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "reason": r.reason,
        "status": r.status.value,
        "created_at": r.created_at.isoformat() if r.created_at else None,
        "decided_at": r.decided_at.isoformat() if r.decided_at else None,
        "admin_note": r.admin_note,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        status = None
        if request.args.get("status"):
            try:
                status = RequestStatus(request.args["status"].upper())
            except ValueError:
                raise ValidationError("Unknown leave status")
        staff_id = arg_int("staff_id") if request.args.get("staff_id") else None
        rows = container.leave_service.list_requests(status=status, staff_id=staff_id)
        return ok([leave_to_dict(r) for r in rows])

    @app.route("/api/leaves", methods=["POST"], endpoint="apply_leave")
    def apply_leave():
        data = json_body()
        try:
            staff_id = int(data.get("staff_id"))
        except (TypeError, ValueError):
            raise ValidationError("staff_id is required")
        request_id = container.leave_service.apply_leave(
            staff_id=staff_id,
            leave_type=data.get("leave_type", ""),
            start_date=parse_iso_date(data.get("start_date", "")),
            end_date=parse_iso_date(data.get("end_date", "")),
            reason=data.get("reason", ""),
        )
        return ok(leave_to_dict(container.leave_service.get_request(request_id)), status=201)

    @app.route("/api/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(request_id: int):
        data = request.get_json(silent=True) or {}
        req = container.leave_service.approve_leave(request_id, admin_note=data.get("admin_note", ""))
        return ok(leave_to_dict(req))

    @app.route("/api/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    def reject_leave(request_id: int):
        data = request.get_json(silent=True) or {}
        req = container.leave_service.reject_leave(request_id, admin_note=data.get("admin_note", ""))
        return ok(leave_to_dict(req))
