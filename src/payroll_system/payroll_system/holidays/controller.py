from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import arg_int, json_body, ok
from ..container import Container
from .model import Holiday


def holiday_to_dict(h: Holiday) -> dict:
    return {"holiday_id": h.holiday_id, "date": h.holiday_date.isoformat(), "name": h.name}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    def list_holidays():
        year = arg_int("year") if request.args.get("year") else None
        return ok([holiday_to_dict(h) for h in container.holiday_service.list_holidays(year=year)])

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    def add_holiday():
        data = json_body()
        holiday_id = container.holiday_service.add_holiday(
            holiday_date=parse_iso_date(data.get("date", "")),
            name=data.get("name", ""),
        )
        return ok({"holiday_id": holiday_id}, status=201)

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="remove_holiday")
    def remove_holiday(holiday_id: int):
        container.holiday_service.remove_holiday(holiday_id)
        return ok({"holiday_id": holiday_id})
