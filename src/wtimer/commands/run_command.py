"""Command 'run' of wtimer"""

from pathlib import Path

import typer

from wtimer.models.history import HistoryStore
from wtimer.models.pomodoro import IntervalScheduler
from wtimer.models.ui import ConsolePrompter, CountdownDisplay, show_summary
from wtimer.services.config_service import get_config_service
from wtimer.services.runner import SessionRunner
from wtimer.utils.ui.console import get_console

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("run")
@command_wrapper
def run_command(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Use a certain config file"
    ),
    history: Path | None = typer.Option(
        None, "--history", help="History file (default: user data dir)"
    ),
    cycles: int | None = typer.Option(
        None, "--cycles", "-n", min=1, help="Run exactly this many cycles without asking"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Do not ring the terminal bell"
    ),
) -> None:
    """Alternate work and rest intervals, saving today's history after each cycle."""
    pomodoro = get_config_service(config).config
    store = HistoryStore(history)
    log = store.load()

    console.print(
        f"\n[bold cyan]🍅 Work {pomodoro.work_duration} min[/bold cyan], "
        f"rest {pomodoro.short_break_duration} min, "
        f"long rest {pomodoro.long_break_duration} min "
        f"every {pomodoro.cycles_before_long_break} cycles\n"
    )
    if len(log):
        console.print(f"[dim]Continuing today's log ({len(log)} cycles so far)[/dim]")

    display = CountdownDisplay(console)
    prompter = ConsolePrompter(console, bell=not quiet)
    runner = SessionRunner(
        IntervalScheduler(pomodoro),
        log,
        store,
        wait=display.wait,
        notify=prompter.notify,
        ask_continue=prompter.ask_continue,
    )

    try:
        runner.run(max_cycles=cycles)
    finally:
        show_summary(log, console)
