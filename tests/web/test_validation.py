"""Tests for request body and query parameter validation."""

from __future__ import annotations

from datetime import date

import pytest

from taskmanager.exceptions import BadRequestError, FieldError, RequestValidationError
from taskmanager.models import TaskStatus
from taskmanager.web.validation import (
    parse_task_filters,
    parse_task_request,
    validate_task_request,
)


def _fields(errors):
    return [e.field for e in errors]


class TestValidateTaskRequest:
    def test_valid_minimal(self):
        assert validate_task_request({"title": "T", "status": "TODO"}) == []

    def test_valid_full(self):
        payload = {
            "title": "T",
            "description": "D",
            "status": "DONE",
            "dueDate": "2024-02-29",
        }
        assert validate_task_request(payload) == []

    def test_reports_in_field_order(self):
        errors = validate_task_request({"description": 5, "dueDate": "x"})

        assert _fields(errors) == ["title", "description", "status", "dueDate"]

    def test_title_required(self):
        errors = validate_task_request({"status": "TODO"})
        assert errors == [FieldError("title", "Title is required")]

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title(self, title):
        errors = validate_task_request({"title": title, "status": "TODO"})
        assert errors == [FieldError("title", "Title must not be blank")]

    def test_title_wrong_type(self):
        errors = validate_task_request({"title": 12, "status": "TODO"})
        assert errors == [FieldError("title", "Title must be a string")]

    def test_title_length_boundary(self):
        assert validate_task_request({"title": "x" * 200, "status": "TODO"}) == []
        errors = validate_task_request({"title": "x" * 201, "status": "TODO"})
        assert errors == [FieldError("title", "Title must be at most 200 characters")]

    def test_description_length_boundary(self):
        ok = {"title": "T", "status": "TODO", "description": "x" * 2000}
        assert validate_task_request(ok) == []
        errors = validate_task_request({**ok, "description": "x" * 2001})
        assert _fields(errors) == ["description"]

    def test_null_description_is_fine(self):
        assert validate_task_request({"title": "T", "status": "TODO", "description": None}) == []

    @pytest.mark.parametrize("status", ["todo", "BLOCKED", "", 1])
    def test_invalid_status(self, status):
        errors = validate_task_request({"title": "T", "status": status})
        assert errors == [
            FieldError("status", "Status must be one of: TODO, IN_PROGRESS, DONE")
        ]

    @pytest.mark.parametrize("due", ["2025-13-01", "2025-02-30", "2025-1-1", "20250101", 20250101])
    def test_invalid_due_date(self, due):
        errors = validate_task_request({"title": "T", "status": "TODO", "dueDate": due})
        assert _fields(errors) == ["dueDate"]


class TestParseTaskRequest:
    def test_builds_request(self):
        request = parse_task_request(
            {"title": "T", "status": "IN_PROGRESS", "dueDate": "2025-05-01"}
        )

        assert request.title == "T"
        assert request.status == TaskStatus.IN_PROGRESS
        assert request.due_date == date(2025, 5, 1)
        assert request.description is None

    def test_non_object_body(self):
        with pytest.raises(BadRequestError):
            parse_task_request(["T"])

    def test_only_camel_case_keys_reach_the_model(self):
        request = parse_task_request(
            {"title": "T", "status": "TODO", "due_date": "not-a-date", "id": 4}
        )

        assert request.due_date is None

    def test_collects_all_errors(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_task_request({})

        assert exc_info.value.field == "title"
        assert _fields(exc_info.value.errors) == ["title", "status"]


class TestParseTaskFilters:
    def test_empty(self):
        assert parse_task_filters({}) == {}

    def test_status(self):
        assert parse_task_filters({"status": "DONE"}) == {"status": TaskStatus.DONE}

    def test_dates(self):
        filters = parse_task_filters({"dueFrom": "2025-01-01", "dueTo": "2025-01-31"})
        assert filters == {"due_from": date(2025, 1, 1), "due_to": date(2025, 1, 31)}

    def test_bad_date(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_task_filters({"dueBefore": "soon"})

        assert exc_info.value.field == "dueBefore"
        assert str(exc_info.value) == "dueBefore must be a date in YYYY-MM-DD format"

    def test_missing_range_end(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_task_filters({"dueTo": "2025-01-31"})

        assert exc_info.value.field == "dueFrom"
