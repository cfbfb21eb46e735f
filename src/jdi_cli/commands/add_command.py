"""Commands 'add' and 'sub' of jdi"""

import typer

from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("add")
@command_wrapper
def add(
    text: list[str] = typer.Argument(..., help="Todo text (words are joined)"),
    parent: int | None = typer.Option(
        None, "--parent", "-p", help="Add as a subtask of this todo ID"
    ),
) -> None:
    """
    Add a new todo.

    Examples:
      jdi add Buy groceries
      jdi add "Buy milk" --parent 1
    """
    todo_service = get_todo_service()
    task = todo_service.add_task(" ".join(text), parent_id=parent)

    if parent is None:
        format_success(f"Added todo [{task.id}]: {task.text}")
    else:
        format_success(f"Added sub-todo [{task.id}] under [{parent}]: {task.text}")


@app.command("sub")
@command_wrapper
def sub(
    parent_id: int = typer.Argument(..., help="Parent todo ID"),
    text: list[str] = typer.Argument(..., help="Todo text (words are joined)"),
) -> None:
    """Add a sub-todo to an existing todo."""
    todo_service = get_todo_service()
    task = todo_service.add_task(" ".join(text), parent_id=parent_id)
    format_success(f"Added sub-todo [{task.id}] under [{parent_id}]: {task.text}")
