"""
Exit codes for the Task Manager CLI.

Semantic exit codes let scripts tell what happened without parsing output.
"""

from __future__ import annotations

import httpx

from taskmanager.api.client import APIError

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Network error (server unreachable, timeout, 5xx after retries)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def exit_code_for(error: Exception) -> int:
    """Pick the exit code for an error raised while talking to the server."""
    if isinstance(error, httpx.RequestError):
        return ERROR_NETWORK
    if isinstance(error, APIError):
        if error.status_code == 404:
            return ERROR_NOT_FOUND
        if error.status_code == 400:
            return ERROR_INVALID_ARGS
        if error.status_code >= 500:
            return ERROR_NETWORK
    return ERROR_GENERAL
