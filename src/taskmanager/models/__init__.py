"""Task Manager domain, wire and configuration models.

These Pydantic models are used throughout the application for data
validation, serialization, and type safety.
"""

from .config_models import (
    ClientConfig,
    CorsConfig,
    DatabaseConfig,
    LoggingConfig,
    ServerConfig,
    Settings,
)
from .dto import ErrorResponse, TaskRequest, TaskResponse
from .task import Task, TaskStatus

__all__ = [
    # Task models
    "Task",
    "TaskStatus",
    # Wire models
    "TaskRequest",
    "TaskResponse",
    "ErrorResponse",
    # Config models
    "Settings",
    "DatabaseConfig",
    "ServerConfig",
    "CorsConfig",
    "LoggingConfig",
    "ClientConfig",
]
