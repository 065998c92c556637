from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .app_logger import get_logger, setup_logging
from .attendance.controller import register as register_attendance
from .common.web import fail
from .container import Container, build_container
from .identity.controller import register as register_identity
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster

logger = get_logger(__name__)


def create_app(*, settings_module: str | None = None, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", None))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = container or build_container(settings=settings)
    logger.info(
        "settings=%s store=%s students=%d",
        settings_module,
        type(container.store).__name__,
        len(container.store.list_students()),
    )

    register_identity(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.errorhandler(500)
    def internal_error(e):
        logger.error("Unhandled error: %s", e, exc_info=e)
        return fail("Internal server error.", 500)

    return app
