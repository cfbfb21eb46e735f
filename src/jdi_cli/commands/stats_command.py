"""Command 'stats' of jdi"""

import typer

from jdi_cli.config import get_config_manager
from jdi_cli.services.todo_service import get_todo_service
from jdi_cli.utils.ui.formatters import format_output, format_stats

from .decorators import command_wrapper
from .options import resolve_output_format

app = typer.Typer()


@app.command("stats")
@command_wrapper
def stats(
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Number of recent completions to show"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/json/yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """Show how many todos were completed and the most recent ones."""
    output = resolve_output_format(output, json_opt)
    if limit is None:
        limit = get_config_manager().config.stats.recent_limit

    completion_stats = get_todo_service().get_stats(limit)

    if not format_output(completion_stats.model_dump(), output):
        format_stats(completion_stats)
