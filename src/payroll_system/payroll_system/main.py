from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .holidays.controller import register as register_holidays
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .staff.controller import register as register_staff

log = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PAYROLL_CALCULATOR"] = getattr(settings, "PAYROLL_CALCULATOR", "standard")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    log.info(
        "settings=%s db=%s@%s:%s/%s calculator=%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        app.config["PAYROLL_CALCULATOR"],
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        log.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(db_config=db_config, calculator=app.config["PAYROLL_CALCULATOR"])
    app.extensions["payroll_container"] = container

    register_error_handlers(app)
    register_staff(app, container)
    register_attendance(app, container)
    register_holidays(app, container)
    register_leaves(app, container)
    register_payroll(app, container)

    return app
