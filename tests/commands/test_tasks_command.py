"""Unit tests for the tasks commands: output, filters and exit codes."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
from typer.testing import CliRunner

from taskmanager.api.client import APIError
from taskmanager.commands.tasks import app

runner = CliRunner()

MOCK_TASK = {
    "id": 1,
    "title": "Buy milk",
    "description": None,
    "status": "TODO",
    "dueDate": "2025-01-10",
    "createdAt": "2025-01-01T12:00:00Z",
    "updatedAt": "2025-01-01T12:00:00Z",
}


def _make_api(**methods):
    """Build a TasksAPI mock with async methods and a closable client."""
    api = MagicMock()
    api.client.close = AsyncMock()
    for name, value in methods.items():
        if isinstance(value, Exception):
            setattr(api, name, AsyncMock(side_effect=value))
        else:
            setattr(api, name, AsyncMock(return_value=value))
    return api


def _invoke(api, args):
    with patch("taskmanager.commands.tasks._tasks_api", return_value=api):
        return runner.invoke(app, args)


class TestList:
    def test_table_output(self):
        api = _make_api(list_tasks=[MOCK_TASK])

        result = _invoke(api, ["list"])

        assert result.exit_code == 0
        assert "Buy milk" in result.output
        api.client.close.assert_awaited_once()

    def test_empty(self):
        result = _invoke(_make_api(list_tasks=[]), ["list"])

        assert result.exit_code == 0
        assert "No tasks found" in result.output

    def test_json_output(self):
        result = _invoke(_make_api(list_tasks=[MOCK_TASK]), ["list", "-o", "json"])

        assert result.exit_code == 0
        assert '"title": "Buy milk"' in result.output

    def test_filters_forwarded(self):
        api = _make_api(list_tasks=[])

        _invoke(api, ["list", "--status", "DONE", "--due-before", "2025-01-05"])

        api.list_tasks.assert_awaited_once_with(
            status="DONE", due_before="2025-01-05", due_from=None, due_to=None
        )


class TestGet:
    def test_found(self):
        result = _invoke(_make_api(get_task=MOCK_TASK), ["get", "1"])

        assert result.exit_code == 0
        assert "Buy milk" in result.output

    def test_not_found_exit_code(self):
        error = APIError(404, "Task not found with id: 9", code="NOT_FOUND")

        result = _invoke(_make_api(get_task=error), ["get", "9"])

        assert result.exit_code == 5
        assert "Task not found with id: 9" in result.output

    def test_server_unreachable_exit_code(self):
        error = httpx.ConnectError("connection refused")

        result = _invoke(_make_api(get_task=error), ["get", "1"])

        assert result.exit_code == 4
        assert "Cannot reach" in result.output


class TestCreate:
    def test_create(self):
        api = _make_api(create_task=MOCK_TASK)

        result = _invoke(api, ["create", "Buy milk", "--due", "2025-01-10"])

        assert result.exit_code == 0
        assert "Task 1 created" in result.output
        api.create_task.assert_awaited_once_with(
            "Buy milk", status="TODO", description=None, due_date="2025-01-10"
        )

    def test_validation_error_exit_code(self):
        error = APIError(400, "Title too long", "VALIDATION_ERROR", "title")

        result = _invoke(_make_api(create_task=error), ["create", "x" * 201])

        assert result.exit_code == 2
        assert "field: title" in result.output


class TestUpdate:
    def test_update(self):
        api = _make_api(update_task={**MOCK_TASK, "status": "DONE"})

        result = _invoke(api, ["update", "1", "--title", "Buy milk", "--status", "DONE"])

        assert result.exit_code == 0
        assert "Task 1 updated" in result.output
        api.update_task.assert_awaited_once_with(
            1, title="Buy milk", status="DONE", description=None, due_date=None
        )

    def test_status_is_required(self):
        result = _invoke(_make_api(), ["update", "1", "--title", "T"])
        assert result.exit_code != 0


class TestDelete:
    def test_delete_with_yes(self):
        api = _make_api(delete_task=None)

        result = _invoke(api, ["delete", "1", "--yes"])

        assert result.exit_code == 0
        assert "Task 1 deleted" in result.output
        api.delete_task.assert_awaited_once_with(1)

    def test_delete_declined(self):
        api = _make_api(delete_task=None)

        with patch("taskmanager.commands.tasks._tasks_api", return_value=api):
            result = runner.invoke(app, ["delete", "1"], input="n\n")

        assert result.exit_code == 0
        api.delete_task.assert_not_called()
