"""Task Manager - a small REST service for tracking tasks."""

__version__ = "1.0.0"
