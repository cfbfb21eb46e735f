"""Command 'list' of jdi"""

import typer

from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.ui.formatters import (
    format_output,
    format_todo_tree,
    tree_to_dicts,
)

from .decorators import command_wrapper
from .options import resolve_output_format

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_todos(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/json/yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List all todos with their sub-todos."""
    output = resolve_output_format(output, json_opt)

    entries = get_todo_service().list_tree()

    if not format_output({"todos": tree_to_dicts(entries)}, output):
        format_todo_tree(entries)
