"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
from collections.abc import Callable

import httpx
import typer

from taskmanager.api.client import APIError
from taskmanager.utils.exit_codes import exit_code_for
from taskmanager.utils.logger import get_logger
from taskmanager.utils.ui.formatters import format_error


def describe_error(error: Exception) -> str:
    """One-line description of an error raised while talking to the server."""
    if isinstance(error, APIError):
        detail = f" (field: {error.field})" if error.field else ""
        code = error.code or error.status_code
        return f"{error.message}{detail} [{code}]"
    if isinstance(error, httpx.RequestError):
        return f"Cannot reach the Task Manager server: {error}"
    return f"An unexpected error occurred: {error}"


def command_wrapper(func: Callable):
    """Run sync or async commands with timing logs and semantic exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if inspect.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, e)
            format_error(describe_error(e))
            raise typer.Exit(code=exit_code_for(e)) from e

        logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
        return result

    return wrapper
