from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

log = logging.getLogger(__name__)


def ok(data=None, status: int = 200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message: str = "Bad Request", status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def arg_date(name: str, default: Optional[date] = None) -> date:
    value = request.args.get(name)
    if not value:
        if default is None:
            raise ValidationError(f"Query parameter '{name}' is required")
        return default
    return parse_iso_date(value)


def arg_int(name: str, default: Optional[int] = None) -> int:
    value = request.args.get(name)
    if value in (None, ""):
        if default is None:
            raise ValidationError(f"Query parameter '{name}' is required")
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Query parameter '{name}' must be an integer")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), status=400)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        log.exception("unhandled error on %s %s", request.method, request.path)
        return fail("Internal server error", status=500)
