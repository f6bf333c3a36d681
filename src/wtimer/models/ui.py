"""Terminal presentation for the timer: countdown, messages and prompts."""

import time
from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm
from rich.table import Table

from .duration import Duration
from .history import SessionLog
from .pomodoro import Phase

PHASE_LABELS = {"work": "🍅 Work", "rest": "☕ Rest"}


class CountdownDisplay:
    """Blocks for a duration while drawing a Rich progress countdown."""

    def __init__(
        self,
        console: Console | None = None,
        tick: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.console = console or Console()
        self.tick = tick
        self.clock = clock
        self.sleep = sleep

    def wait(self, duration: Duration, phase: Phase) -> None:
        """Count down ``duration``. KeyboardInterrupt propagates to the caller."""
        total_seconds = duration.to_seconds()
        label = PHASE_LABELS.get(phase, phase)
        start = self.clock()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task(label, total=total_seconds or 1)

            while (elapsed := self.clock() - start) < total_seconds:
                remaining = int(total_seconds - elapsed)
                mins, secs = divmod(remaining, 60)
                progress.update(
                    task,
                    completed=elapsed,
                    description=f"{label}  {mins:02d}:{secs:02d} remaining",
                )
                self.sleep(min(self.tick, total_seconds - elapsed))

            progress.update(task, completed=total_seconds or 1)


class ConsolePrompter:
    """Phase-end messages and the "continue?" question on a Rich console."""

    def __init__(self, console: Console | None = None, bell: bool = True):
        self.console = console or Console()
        self.bell = bell

    def notify(self, message: str) -> None:
        if self.bell:
            self.console.bell()
        self.console.print(Panel(f"[bold green]{message}[/bold green]", expand=False))

    def ask_continue(self) -> bool | None:
        """Ask whether to run another cycle; None when input is closed."""
        try:
            return Confirm.ask(
                "Continue pomodoring?", default=True, console=self.console
            )
        except EOFError:
            return None


def history_table(log: SessionLog) -> Table:
    """Build a table of the log's cycles with a totals row."""
    table = Table(title=f"Sessions on {log.date.isoformat()} ({len(log)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Work", justify="right", style="cyan")
    table.add_column("Rest", justify="right", style="green")

    for number, entry in enumerate(log.entries, start=1):
        table.add_row(str(number), str(entry.work), str(entry.rest))

    if log.entries:
        table.add_section()
        table.add_row(
            "Total",
            str(log.total_work()),
            str(log.total_rest()),
            style="bold",
        )
    return table


def show_summary(log: SessionLog, console: Console | None = None) -> None:
    """Show today's totals after a run."""
    console = console or Console()

    panel = Panel(
        f"""[bold]Cycles today:[/bold] {len(log)}
[bold]Work:[/bold] {log.total_work().as_mins()} minutes
[bold]Rest:[/bold] {log.total_rest().as_mins()} minutes""",
        title="wtimer",
        border_style="cyan",
        padding=(1, 2),
    )

    console.print(panel)
