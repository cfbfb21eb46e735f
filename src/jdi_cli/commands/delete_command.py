"""Command 'delete' of jdi"""

import typer

from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.exit_codes import ERROR_NOT_FOUND
from jdi_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete(
    task_id: int = typer.Argument(..., help="Todo ID"),
) -> None:
    """Delete a todo and all its sub-todos. Nothing is archived."""
    todo_service = get_todo_service()
    if not todo_service.delete_task(task_id):
        raise AppError(f"Todo with ID {task_id} not found", exit_code=ERROR_NOT_FOUND)
    format_success(f"Deleted todo [{task_id}] and all its sub-todos")
