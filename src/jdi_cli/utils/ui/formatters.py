"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.text import Text

from jdi_cli.models import CompletionStats, Task
from jdi_cli.utils.ui.console import get_console

OUTPUT_FORMATS = ("pretty", "json", "yaml")

OPEN_ICON = "○"
DONE_ICON = "✓"
INDENT = "  "

console = get_console()


def format_output(data: Any, output_format: str = "pretty") -> bool:
    """Print data as json or yaml.

    Returns:
        False if output_format is "pretty" (the caller renders it), True otherwise
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    else:
        return False
    return True


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(Text.assemble(("Error:", "bold red"), " ", message))


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(Text.assemble(("Success:", "bold green"), " ", message))


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(Text.assemble(("Info:", "bold blue"), " ", message))


def tree_to_dicts(entries: list[tuple[int, Task]]) -> list[dict]:
    """Flatten (depth, task) pairs into plain dicts for json/yaml output."""
    return [{**task.model_dump(), "depth": depth} for depth, task in entries]


def format_todo_tree(entries: list[tuple[int, Task]]) -> None:
    """Print todos indented two spaces per nesting level."""
    if not entries:
        console.print("No todos found. Use 'jdi add <text>' to add a new todo.")
        return

    for depth, task in entries:
        console.print(
            Text.assemble(
                INDENT * depth,
                (f"[{task.id}]", "cyan"),
                " ",
                (OPEN_ICON, "dim"),
                " ",
                task.text,
            )
        )


def format_stats(stats: CompletionStats) -> None:
    """Print the completion count and the most recent completions."""
    console.print(
        Text.assemble(("Total completed: ", "bold"), (str(stats.completed_count), "green"))
    )
    if not stats.recent:
        console.print("No completed todos yet.")
        return

    console.print()
    console.print(Text(f"Recently completed ({len(stats.recent)}):", style="bold"))
    for record in stats.recent:
        line = Text.assemble(
            INDENT,
            (DONE_ICON, "green"),
            " ",
            (f"[{record.id}]", "cyan"),
            " ",
            record.text,
            " ",
            (f"({record.completed_at})", "dim"),
        )
        if record.had_subtasks:
            noun = "subtask" if record.subtask_count == 1 else "subtasks"
            line.append(f" +{record.subtask_count} {noun}", style="yellow")
        console.print(line)
