"""Command 'history' of wtimer"""

import json
from pathlib import Path

import typer

from wtimer.models.history import HistoryStore
from wtimer.models.ui import history_table
from wtimer.utils.ui.console import get_console

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("history")
@command_wrapper
def history_command(
    history: Path | None = typer.Option(
        None, "--history", help="History file (default: user data dir)"
    ),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the cycles recorded today."""
    log = HistoryStore(history).load()

    if json_opt:
        typer.echo(json.dumps(log.to_dict(), indent=2))
        return

    if not len(log):
        console.print("[yellow]No cycles recorded today[/yellow]")
        return

    console.print(history_table(log))
