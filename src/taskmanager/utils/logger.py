"""Logging for the service and the CLI.

Every module logs through a child of the ``taskmanager`` logger. Records go
to a rotating file under the platform log directory and, when serving, to
the terminal through rich.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir
from rich.logging import RichHandler

_APP_NAME = "taskmanager"
_LOG_FILE = "taskmanager.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _file_handler() -> logging.Handler:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a child of it when *name* is given.

    ``get_logger(__name__)`` inside the package yields ``taskmanager.<module>``.
    """
    global _logger
    if _logger is None:
        root = logging.getLogger(_APP_NAME)
        root.setLevel(logging.DEBUG)
        file_handlers = [
            h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        if not file_handlers:
            root.addHandler(_file_handler())
        root.propagate = False
        _logger = root

    if name is None:
        return _logger
    return _logger.getChild(name.removeprefix(f"{_APP_NAME}."))


def configure_logging(level: str = "INFO", console: bool = False) -> logging.Logger:
    """Apply the configured level and optionally mirror records to the terminal."""
    logger = get_logger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if console and not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    return logger
