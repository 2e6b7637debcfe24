from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .activity.controller import register as register_activity
from .attendance.controller import register as register_attendance
from .container import build_container
from .performance.controller import register as register_performance
from .reports.controller import register as register_reports
from .storage.repository import KeyValueStore
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, storage: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    storage_config = dict(getattr(settings, "STORAGE_CONFIG"))
    logger.info("settings=%s storage=%s", settings_module, storage_config)

    container = build_container(
        storage_config=storage_config,
        replace_same_day_attendance=bool(getattr(settings, "REPLACE_SAME_DAY_ATTENDANCE", False)),
        storage=storage,
    )
    app.extensions["roster_container"] = container

    register_students(app, container)
    register_attendance(app, container)
    register_performance(app, container)
    register_reports(app, container)
    register_activity(app, container)

    return app
