"""Main entry point for jdi."""

import typer

from jdi_cli import __version__
from jdi_cli.commands import config_command
from jdi_cli.commands.add_command import add, sub
from jdi_cli.commands.delete_command import delete
from jdi_cli.commands.done_command import done
from jdi_cli.commands.list_command import list_todos
from jdi_cli.commands.renumber_command import renumber
from jdi_cli.commands.stats_command import stats
from jdi_cli.utils.typer_helpers import SuggestingGroup
from jdi_cli.utils.ui.console import get_console

USAGE = """\
jdi - Simple command-line todo manager

USAGE:
  jdi [COMMAND] [ARGS]

COMMANDS:
  list, ls                 List all todos
  add <text>               Add a new todo (--parent <id> for a sub-todo)
  sub <parent_id> <text>   Add a sub-todo to an existing todo
  done <id>                Complete a todo and archive it with its sub-todos
  delete, rm <id>          Delete a todo and all its sub-todos
  stats                    Show completion statistics
  renumber                 Renumber todos from 1 in display order
  config                   View or change configuration
  help                     Show this help message

EXAMPLES:
  jdi add "Buy groceries"
  jdi sub 1 "Buy milk"
  jdi done 2
  jdi delete 1
"""

app = typer.Typer(
    name="jdi",
    cls=SuggestingGroup,
    help="Simple command-line todo manager with nested sub-todos",
    invoke_without_command=True,
)

console = get_console()

app.command("add")(add)
app.command("sub")(sub)
app.command("done")(done)
app.command("complete", hidden=True)(done)
app.command("delete")(delete)
app.command("rm", hidden=True)(delete)
app.command("list")(list_todos)
app.command("ls", hidden=True)(list_todos)
app.command("stats")(stats)
app.command("renumber")(renumber)
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.callback()
def default(ctx: typer.Context) -> None:
    """List todos when no command is given."""
    if ctx.invoked_subcommand is None:
        list_todos(output=None, json_opt=False)


@app.command("help")
def show_help() -> None:
    """Show usage and examples."""
    console.print(USAGE, highlight=False, markup=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]jdi[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
