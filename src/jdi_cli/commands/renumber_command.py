"""Command 'renumber' of jdi"""

import typer

from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("renumber")
@command_wrapper
def renumber() -> None:
    """Renumber all todos from 1 in display order."""
    todo_service = get_todo_service()
    count = todo_service.renumber()
    format_success(f"Renumbered {count} todo(s)")
