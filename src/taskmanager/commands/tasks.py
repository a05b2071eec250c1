"""Task commands that talk to a running Task Manager server."""

import typer

from taskmanager.api import TasksAPI, get_client
from taskmanager.commands.decorators import command_wrapper
from taskmanager.config import get_settings
from taskmanager.models import TaskStatus
from taskmanager.utils.ui.formatters import format_output, format_success

app = typer.Typer(help="Task management commands (requires a running server)")


def _tasks_api() -> TasksAPI:
    settings = get_settings()
    return TasksAPI(get_client(settings.client), settings.server.api_prefix)


def _status_value(status: TaskStatus | None) -> str | None:
    return status.value if status is not None else None


@app.command("list")
@command_wrapper
async def list_tasks(
    status: TaskStatus | None = typer.Option(None, "--status", help="Only tasks with this status"),
    due_before: str | None = typer.Option(None, "--due-before", help="Due strictly before YYYY-MM-DD"),
    due_from: str | None = typer.Option(None, "--due-from", help="Range start YYYY-MM-DD (inclusive)"),
    due_to: str | None = typer.Option(None, "--due-to", help="Range end YYYY-MM-DD (inclusive)"),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """List tasks."""
    api = _tasks_api()
    try:
        tasks = await api.list_tasks(
            status=_status_value(status),
            due_before=due_before,
            due_from=due_from,
            due_to=due_to,
        )
    finally:
        await api.client.close()
    format_output(tasks, output)


@app.command("get")
@command_wrapper
async def get_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """Show a single task."""
    api = _tasks_api()
    try:
        task = await api.get_task(task_id)
    finally:
        await api.client.close()
    format_output(task, output)


@app.command("create")
@command_wrapper
async def create_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str | None = typer.Option(None, "--description", "-d", help="Task description"),
    status: TaskStatus = typer.Option(TaskStatus.TODO, "--status", help="Initial status"),
    due: str | None = typer.Option(None, "--due", help="Due date YYYY-MM-DD"),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """Create a task."""
    api = _tasks_api()
    try:
        task = await api.create_task(
            title, status=status.value, description=description, due_date=due
        )
    finally:
        await api.client.close()
    format_success(f"Task {task['id']} created")
    format_output(task, output)


@app.command("update")
@command_wrapper
async def update_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str = typer.Option(..., "--title", help="New title"),
    status: TaskStatus = typer.Option(..., "--status", help="New status"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="New description (omitting it clears it)"
    ),
    due: str | None = typer.Option(None, "--due", help="New due date (omitting it clears it)"),
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
) -> None:
    """Replace every editable field of a task."""
    api = _tasks_api()
    try:
        task = await api.update_task(
            task_id,
            title=title,
            status=status.value,
            description=description,
            due_date=due,
        )
    finally:
        await api.client.close()
    format_success(f"Task {task_id} updated")
    format_output(task, output)


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    if not yes and not typer.confirm(f"Delete task {task_id}?"):
        raise typer.Exit(0)
    api = _tasks_api()
    try:
        await api.delete_task(task_id)
    finally:
        await api.client.close()
    format_success(f"Task {task_id} deleted")
