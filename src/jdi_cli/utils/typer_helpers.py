"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from click import Context
from rich.text import Text
from typer.core import TyperGroup

from jdi_cli.utils.ui.console import get_console
from jdi_cli.utils.ui.formatters import format_error

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Return the command names closest to a mistyped one, best match first."""
    return get_close_matches(
        attempted, commands, n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
    )


class SuggestingGroup(TyperGroup):
    """Command group that answers an unknown command with "Did you mean".

    Hidden aliases (``ls``, ``rm``, ``complete``) are never suggested.
    """

    def resolve_command(self, ctx: Context, args: list[str]):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            visible = [name for name, cmd in self.commands.items() if not cmd.hidden]
            suggestions = suggest_commands(attempted, visible)
            if not suggestions:
                raise

            console = get_console()
            format_error(f'unknown command "{attempted}" for "{ctx.info_name}"')
            console.print()
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(Text(heading, style="yellow"))
            for suggestion in suggestions:
                console.print(Text(f"        {suggestion}"))
            raise typer.Exit(1) from e
