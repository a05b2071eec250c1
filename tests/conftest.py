"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: logs,
config and data directories all land in *tmp_path*.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from taskmanager.adapters.sqlite import SqliteTaskRepository, get_connection, migrate
from taskmanager.config import ENV_OVERRIDES
from taskmanager.models import DatabaseConfig, Settings


# ---------------------------------------------------------------------------
# Isolation helpers
# ---------------------------------------------------------------------------


def _reset_logger() -> None:
    import taskmanager.utils.logger as logger_mod

    logger_mod._logger = None
    app_logger = logging.getLogger("taskmanager")
    for handler in list(app_logger.handlers):
        if not isinstance(handler, (logging.handlers.RotatingFileHandler, RichHandler)):
            continue
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point every platform dir at *tmp_path* and drop TASKMANAGER_* variables."""
    import taskmanager.config as config_mod

    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)

    _reset_logger()
    config_mod._settings_manager = None
    with patch("taskmanager.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        with patch("taskmanager.config.user_config_dir", return_value=str(tmp_path / "config")):
            with patch("taskmanager.config.user_data_dir", return_value=str(tmp_path / "data")):
                with patch("taskmanager.config.load_dotenv"):
                    yield
    config_mod._settings_manager = None
    _reset_logger()


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "tasks.db"


@pytest.fixture
def connection(db_path):
    """Fresh file database with the full migration schema applied."""
    conn = get_connection(db_path)
    migrate(conn)
    yield conn
    conn.close()


@pytest.fixture
def repo(connection):
    return SqliteTaskRepository(connection=connection)


# ---------------------------------------------------------------------------
# Flask fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(db_path):
    return Settings(database=DatabaseConfig(path=str(db_path)))


@pytest.fixture
def app(settings):
    from taskmanager.web import create_app

    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
