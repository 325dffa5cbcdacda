from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import month_bounds, now_local
from ..common.http import arg_date, json_body, ok
from ..container import Container
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "attendance_id": r.attendance_id,
        "staff_id": r.staff_id,
        "date": r.work_date.isoformat(),
        "in_time": r.in_time.strftime("%H:%M:%S") if r.in_time else None,
        "out_time": r.out_time.strftime("%H:%M:%S") if r.out_time else None,
        "status": "Present" if r.is_present else "Absent",
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Called by the face-scan kiosk once a face is matched to a staff id."""
        data = json_body()
        try:
            staff_id = int(data.get("staff_id"))
        except (TypeError, ValueError):
            raise ValidationError("staff_id is required")
        record = container.attendance_service.mark_present(staff_id)
        action = "out" if record.out_time else "in"
        return ok(record_to_dict(record), action=action)

    @app.route("/api/attendance/<int:staff_id>", methods=["GET"], endpoint="staff_attendance")
    def staff_attendance(staff_id: int):
        today = now_local().date()
        default_start, default_end = month_bounds(today.year, today.month)
        start = arg_date("start", default_start)
        end = arg_date("end", default_end)

        records = container.attendance_service.list_for_staff(staff_id, start, end)
        present = sum(1 for r in records if r.is_present)
        return ok([record_to_dict(r) for r in records], present_days=present)
