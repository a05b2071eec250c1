"""Main entry point for the Task Manager CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from taskmanager import __version__
from taskmanager.adapters.sqlite import get_connection
from taskmanager.adapters.sqlite.migrations import ALL_MIGRATIONS, MigrationRunner
from taskmanager.commands import config, tasks
from taskmanager.config import get_settings, resolve_database_path
from taskmanager.utils.logger import configure_logging, get_logger
from taskmanager.utils.ui.formatters import format_error, format_info, format_success

app = typer.Typer(
    name="taskmanager",
    help="Task Manager: a small REST service for tracking tasks",
    no_args_is_help=True,
)

console = Console()

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Task Manager[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    debug: bool | None = typer.Option(None, "--debug/--no-debug", help="Flask debug mode"),
    db: Path | None = typer.Option(None, "--db", help="SQLite database file"),
) -> None:
    """Run the HTTP server."""
    from taskmanager.web import create_app

    settings = get_settings()
    configure_logging(settings.logging.level, console=settings.logging.console)

    flask_app = create_app(settings, db_path=db)
    host = host or settings.server.host
    port = port or settings.server.port
    debug = settings.server.debug if debug is None else debug

    get_logger(__name__).info("serving on http://%s:%s", host, port)
    flask_app.run(host=host, port=port, debug=debug, use_reloader=False)


@app.command()
def migrate(
    db: Path | None = typer.Option(None, "--db", help="SQLite database file"),
) -> None:
    """Apply pending schema migrations and show the history."""
    path = db or resolve_database_path(get_settings())
    connection = get_connection(path)
    try:
        runner = MigrationRunner(connection)
        applied = runner.run_migrations(ALL_MIGRATIONS)
        history = runner.get_migration_history()
    except RuntimeError as e:
        format_error(str(e))
        raise typer.Exit(1)
    finally:
        connection.close()

    if applied:
        format_success(f"Applied {applied} migration(s) to {path}")
    else:
        format_info(f"Database {path} is up to date")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Version")
    table.add_column("Description")
    table.add_column("Applied At")
    for row in history:
        table.add_row(str(row["version"]), row["description"], row["applied_at"])
    console.print(table)


if __name__ == "__main__":
    app()
