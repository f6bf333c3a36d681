"""Main entry point for wtimer."""

import typer

from wtimer import __version__
from wtimer.commands import config, history_command, run_command
from wtimer.utils.ui.console import get_console

app = typer.Typer(
    name="wtimer",
    help="A console app to manage your time with work and rest intervals",
    no_args_is_help=True,
)

console = get_console()


app.add_typer(run_command.app)
app.add_typer(history_command.app)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]wtimer[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
