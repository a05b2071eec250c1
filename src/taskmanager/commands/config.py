"""Configuration management commands."""

from typing import Optional

import typer
from rich.console import Console

from taskmanager.config import get_settings_manager
from taskmanager.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(help="Configuration management commands")
console = Console()


@app.command("show")
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="json or yaml"),
) -> None:
    """Show the effective configuration (file plus environment)."""
    format_output(get_settings_manager().settings.model_dump(), output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., server.port)"),
) -> None:
    """Get a configuration value."""
    value = get_settings_manager().get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., server.port)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value in the config file."""
    try:
        get_settings_manager().set(key, value)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(2)
    except ValueError as e:
        format_error(f"Invalid value for '{key}': {e}")
        raise typer.Exit(2)
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not typer.confirm(f"Reset {target} to defaults?"):
            raise typer.Exit(0)
    try:
        get_settings_manager().reset(key)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(2)
    format_success("Configuration reset")
