"""Client for the Task Manager REST API."""

from .client import APIClient, APIError, get_client
from .tasks import TasksAPI

__all__ = ["APIClient", "APIError", "TasksAPI", "get_client"]
