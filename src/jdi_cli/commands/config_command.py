"""Configuration management commands."""

from typing import Optional

import typer
from pydantic import BaseModel, ValidationError

from jdi_cli.config import get_config_manager
from jdi_cli.utils.exit_codes import ERROR_INVALID_ARGS
from jdi_cli.utils.ui.console import get_console
from jdi_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | None:
    """Convert a command-line string to the type it looks like."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lower() in ("none", "null"):
        return None
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("json", "--output", "-o", help="Output format (json/yaml)"),
) -> None:
    """View current configuration."""
    config_dict = get_config_manager().config.model_dump()
    if not format_output(config_dict, output):
        format_output(config_dict, "json")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.data_file)"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager()
    try:
        value = config_manager.get(key)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None

    if isinstance(value, BaseModel):
        format_output(value.model_dump(), "json")
    else:
        console.print(value, highlight=False, markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.data_file)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager()
    parsed_value = _parse_value(value)
    try:
        config_manager.set(key, parsed_value)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise AppError(
            f"Invalid value for '{key}': {reason}", exit_code=ERROR_INVALID_ARGS
        ) from None
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    config_manager = get_config_manager()
    try:
        config_manager.reset(key)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
