"""Translation of exceptions into the uniform JSON error body."""

from __future__ import annotations

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from taskmanager.exceptions import (
    BadRequestError,
    RequestValidationError,
    TaskNotFoundError,
)
from taskmanager.models import ErrorResponse
from taskmanager.utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"
BAD_REQUEST = "BAD_REQUEST"

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def map_exception(exc: Exception) -> tuple[ErrorResponse, int]:
    """Map any exception to an error body and HTTP status code."""
    if isinstance(exc, TaskNotFoundError):
        logger.warning("task not found: %s", exc)
        return ErrorResponse(message=str(exc), code=NOT_FOUND), 404

    if isinstance(exc, RequestValidationError):
        logger.warning("validation error: %s on field: %s", exc, exc.field)
        return (
            ErrorResponse(message=str(exc), code=VALIDATION_ERROR, field=exc.field),
            400,
        )

    if isinstance(exc, BadRequestError):
        logger.warning("bad request: %s", exc)
        return ErrorResponse(message=str(exc), code=BAD_REQUEST), 400

    if isinstance(exc, HTTPException) and exc.code is not None and exc.code < 500:
        logger.warning("http %s: %s", exc.code, exc.description)
        code = NOT_FOUND if exc.code == 404 else BAD_REQUEST
        return ErrorResponse(message=exc.description or exc.name, code=code), exc.code

    logger.error("unexpected error occurred", exc_info=exc)
    return ErrorResponse(message=GENERIC_ERROR_MESSAGE, code=INTERNAL_ERROR), 500


def handle_exception(exc: Exception) -> tuple[Response, int]:
    """Flask error handler rendering :func:`map_exception` as JSON."""
    body, status = map_exception(exc)
    response = jsonify(body.to_json())
    if isinstance(exc, MethodNotAllowed) and exc.valid_methods:
        response.headers["Allow"] = ", ".join(exc.valid_methods)
    return response, status


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(Exception, handle_exception)
