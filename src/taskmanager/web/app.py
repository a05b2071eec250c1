"""Flask application factory."""

from __future__ import annotations

import re
from pathlib import Path

from flask import Flask
from flask_cors import CORS

from taskmanager.adapters.sqlite import init_database
from taskmanager.config import get_settings, resolve_database_path
from taskmanager.models import Settings
from taskmanager.utils.logger import configure_logging, get_logger
from taskmanager.web.db import close_db
from taskmanager.web.errors import register_error_handlers
from taskmanager.web.routes import health_bp, tasks_bp

logger = get_logger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def compile_origin(origin: str) -> str | re.Pattern[str]:
    """Turn a ``*`` wildcard origin into an anchored regex; others pass through."""
    if "*" not in origin:
        return origin
    parts = (re.escape(part) for part in origin.split("*"))
    return re.compile("^" + "[^/]*".join(parts) + "$")


def create_app(settings: Settings | None = None, db_path: str | Path | None = None) -> Flask:
    """Build the Task Manager WSGI application.

    Args:
        settings: Effective settings; the global settings when omitted.
        db_path: Overrides the database location from the settings.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.logging.level)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["SETTINGS"] = settings
    app.config["DATABASE_PATH"] = str(db_path or resolve_database_path(settings))

    init_database(app.config["DATABASE_PATH"])

    CORS(
        app,
        origins=[compile_origin(o) for o in settings.cors.allowed_origins],
        methods=CORS_METHODS,
        supports_credentials=True,
    )

    app.register_blueprint(tasks_bp, url_prefix=settings.server.api_prefix or None)
    app.register_blueprint(health_bp)
    register_error_handlers(app)
    app.teardown_appcontext(close_db)

    logger.info(
        "task manager app created (database: %s, prefix: '%s')",
        app.config["DATABASE_PATH"],
        settings.server.api_prefix,
    )
    return app
