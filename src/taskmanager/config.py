"""Configuration management for Task Manager.

Settings come from three layers, later ones winning:

1. Defaults declared on the models in :mod:`taskmanager.models.config_models`
2. ``config.json`` in the platform user config directory
3. ``TASKMANAGER_*`` environment variables (a ``.env`` file is loaded first)
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from taskmanager.models.config_models import Settings

APP_NAME = "taskmanager"
DEFAULT_DB_FILE = "tasks.db"

# Environment variable -> dot-separated settings key
ENV_OVERRIDES = {
    "TASKMANAGER_DATABASE_PATH": "database.path",
    "TASKMANAGER_HOST": "server.host",
    "TASKMANAGER_PORT": "server.port",
    "TASKMANAGER_DEBUG": "server.debug",
    "TASKMANAGER_API_PREFIX": "server.api_prefix",
    "TASKMANAGER_CORS_ALLOWED_ORIGINS": "cors.allowed_origins",
    "TASKMANAGER_LOG_LEVEL": "logging.level",
    "TASKMANAGER_API_ENDPOINT": "client.endpoint",
}


def _set_nested(data: dict[str, Any], key: str, value: Any) -> None:
    keys = key.split(".")
    current = data
    for k in keys[:-1]:
        if k not in current or not isinstance(current[k], dict):
            current[k] = {}
        current = current[k]
    current[keys[-1]] = value


def _is_known_key(key: str) -> bool:
    model: type[BaseModel] = Settings
    parts = key.split(".")
    for i, k in enumerate(parts):
        if k not in model.model_fields:
            return False
        if i == len(parts) - 1:
            return True
        annotation = model.model_fields[k].annotation
        if not (isinstance(annotation, type) and issubclass(annotation, BaseModel)):
            return False
        model = annotation
    return False


def _get_from(settings: BaseModel, key: str) -> Any:
    value: Any = settings
    for k in key.split("."):
        if isinstance(value, BaseModel):
            value = getattr(value, k, None)
        else:
            return None
    return value


class SettingsManager:
    """Manages the Task Manager settings file and environment overrides."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_file = self.config_dir / "config.json"
        self.environ = environ if environ is not None else os.environ

        self._settings: Settings | None = None

    @property
    def settings(self) -> Settings:
        """Get the effective settings (file + environment)."""
        if self._settings is None:
            self._settings = self.apply_environment(self.load_file())
        return self._settings

    def load_file(self) -> Settings:
        """Load settings from the config file only."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    return Settings.model_validate_json(f.read())
            except (OSError, ValueError):
                # Corrupted config falls back to defaults
                return Settings()
        return Settings()

    def apply_environment(self, settings: Settings) -> Settings:
        """Return a copy of *settings* with ``TASKMANAGER_*`` overrides applied."""
        data = settings.model_dump()
        for env_name, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value is not None and value != "":
                _set_nested(data, key, value)
        return Settings.model_validate(data)

    def save_file(self, settings: Settings) -> None:
        """Write *settings* to the config file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(settings.model_dump(), f, indent=2)
        self._settings = None

    def get(self, key: str) -> Any:
        """Get an effective setting by dot-separated key."""
        return _get_from(self.settings, key)

    def set(self, key: str, value: Any) -> None:
        """Persist a setting by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
        """
        if not _is_known_key(key):
            raise KeyError(key)
        data = self.load_file().model_dump()
        _set_nested(data, key, value)
        self.save_file(Settings.model_validate(data))

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole file, to defaults."""
        if key is None:
            self.save_file(Settings())
            return
        if not _is_known_key(key):
            raise KeyError(key)
        data = self.load_file().model_dump()
        _set_nested(data, key, _get_from(Settings(), key))
        self.save_file(Settings.model_validate(data))


def resolve_database_path(settings: Settings) -> Path:
    """SQLite file from the settings, or ``tasks.db`` in the user data dir."""
    if settings.database.path:
        return Path(settings.database.path).expanduser()
    return Path(user_data_dir(APP_NAME)) / DEFAULT_DB_FILE


_settings_manager: SettingsManager | None = None


def get_settings_manager() -> SettingsManager:
    """Get or create the global settings manager.

    Loads a ``.env`` file from the working directory on first use.
    """
    global _settings_manager
    if _settings_manager is None:
        load_dotenv()
        _settings_manager = SettingsManager()
    return _settings_manager


def get_settings() -> Settings:
    """Shortcut for the effective settings of the global manager."""
    return get_settings_manager().settings
