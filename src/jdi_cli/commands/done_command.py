"""Command 'done' of jdi"""

import typer

from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.ui.console import get_console
from jdi_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("done")
@command_wrapper
def done(
    task_id: int = typer.Argument(..., help="Todo ID"),
) -> None:
    """Complete a todo and archive it. Its subtasks are removed with it."""
    todo_service = get_todo_service()
    text, subtask_count = todo_service.complete_task(task_id)

    format_success(f"Completed todo [{task_id}]: {text}")
    if subtask_count:
        noun = "subtask" if subtask_count == 1 else "subtasks"
        console.print(f"[dim]Removed along with {subtask_count} {noun}[/dim]")
