"""HTTP boundary of Task Manager: routes, validation, mapping and errors."""

from .app import create_app

__all__ = ["create_app"]
