"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

STATUS_STYLES = {
    "TODO": "yellow",
    "IN_PROGRESS": "cyan",
    "DONE": "green",
}

TASK_COLUMNS = [
    ("id", "ID"),
    ("title", "Title"),
    ("status", "Status"),
    ("dueDate", "Due"),
    ("description", "Description"),
    ("updatedAt", "Updated"),
]


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, list):
        format_task_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "✓" if value else "✗"
    return str(value)


def _status_text(status: str | None) -> str:
    if status is None:
        return "-"
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{status}[/{style}]"


def format_task_table(tasks: list[dict]) -> None:
    """Render tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    for _, header in TASK_COLUMNS:
        table.add_column(header)

    for task in tasks:
        row = []
        for key, _ in TASK_COLUMNS:
            value = task.get(key)
            row.append(_status_text(value) if key == "status" else _cell(value))
        table.add_row(*row)

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted = _status_text(value) if key == "status" else _cell(value)
        table.add_row(key, formatted)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
