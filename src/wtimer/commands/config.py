"""Configuration management commands."""

from pathlib import Path

import typer
from pydantic import ValidationError

from wtimer.models.pomodoro import PomodoroConfig
from wtimer.services.config_service import get_config_service
from wtimer.utils.exit_codes import ERROR_INVALID_ARGS
from wtimer.utils.ui.console import get_console
from wtimer.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
) -> None:
    """Show the configuration in effect."""
    typer.echo(get_config_service(config).as_json())


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., work_duration)"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service(config).get(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", ERROR_INVALID_ARGS
        ) from e
    typer.echo(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., work_duration)"),
    value: int = typer.Argument(..., help="Configuration value"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
) -> None:
    """Set a configuration value."""
    try:
        updated = get_config_service(config).set(key, value)
    except KeyError as e:
        valid = ", ".join(PomodoroConfig.model_fields)
        raise AppError(
            f"Unknown configuration key '{key}' (expected one of: {valid})",
            ERROR_INVALID_ARGS,
        ) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for '{key}': {e.errors()[0]['msg']}",
            ERROR_INVALID_ARGS,
        ) from e
    format_success(f"Configuration '{key}' set to '{getattr(updated, key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset the configuration to defaults?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    get_config_service(config).reset()
    format_success("Configuration reset to defaults")


@app.command("path")
@command_wrapper
def config_path(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
) -> None:
    """Print the location of the configuration file."""
    typer.echo(str(get_config_service(config).config_path))
