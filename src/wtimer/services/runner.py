"""Session runner: drives work/rest cycles and records what actually happened."""

from __future__ import annotations

import time
from collections.abc import Callable

from wtimer.models.duration import ZERO, Duration
from wtimer.models.history import HistoryStore, SessionEntry, SessionLog
from wtimer.models.pomodoro import IntervalScheduler, Phase
from wtimer.utils.logger import get_logger

WORK_DONE_MESSAGE = "Done working. Have your rest."
REST_DONE_MESSAGE = "Done resting. Back to work."

Waiter = Callable[[Duration, Phase], None]
Notifier = Callable[[str], None]
Asker = Callable[[], bool | None]


def sleep_wait(duration: Duration, phase: Phase) -> None:
    """Block the calling thread for ``duration``."""
    time.sleep(duration.to_seconds())


class SessionRunner:
    """Runs cycles until the user stops, saving history after each one.

    The runner owns the scheduler and today's log for the whole run. Waiting,
    messages and the "continue?" question are handed in so the loop itself
    stays free of terminal I/O.
    """

    def __init__(
        self,
        scheduler: IntervalScheduler,
        log: SessionLog,
        store: HistoryStore,
        *,
        wait: Waiter = sleep_wait,
        notify: Notifier | None = None,
        ask_continue: Asker | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.scheduler = scheduler
        self.log = log
        self.store = store
        self.wait = wait
        self.notify = notify or (lambda message: None)
        self.ask_continue = ask_continue or (lambda: None)
        self.clock = clock

    def _elapsed_since(self, start: float) -> Duration:
        return Duration.from_seconds(max(0, int(self.clock() - start)))

    def _record(self, entry: SessionEntry) -> SessionEntry:
        self.log.append(entry)
        get_logger().info(
            "Cycle %d recorded: work %s, rest %s",
            len(self.log),
            entry.work,
            entry.rest,
        )
        self.store.save(self.log)
        return entry

    def run_cycle(self) -> SessionEntry:
        """Run one work interval and one rest interval.

        Raises:
            PersistenceWriteError: If the history file cannot be overwritten;
                the entry stays in ``self.log``
            KeyboardInterrupt: After the interrupted cycle has been saved
                with the time actually spent
        """
        logger = get_logger()

        work = self.scheduler.next_work_interval()
        logger.info(
            "Work interval %d started (%d min)",
            self.scheduler.completed_work_cycles,
            work.as_mins(),
        )
        start = self.clock()
        try:
            self.wait(work, "work")
            self.notify(WORK_DONE_MESSAGE)
        except KeyboardInterrupt:
            actual_work = self._elapsed_since(start)
            self.scheduler.next_rest_interval()
            logger.info("Interrupted during work after %s", actual_work)
            self._record(SessionEntry(actual_work, ZERO))
            raise
        actual_work = self._elapsed_since(start)

        rest = self.scheduler.next_rest_interval()
        logger.info("Rest interval started (%d min)", rest.as_mins())
        start = self.clock()
        try:
            self.wait(rest, "rest")
            self.notify(REST_DONE_MESSAGE)
        except KeyboardInterrupt:
            actual_rest = self._elapsed_since(start)
            logger.info("Interrupted during rest after %s", actual_rest)
            self._record(SessionEntry(actual_work, actual_rest))
            raise
        actual_rest = self._elapsed_since(start)

        return self._record(SessionEntry(actual_work, actual_rest))

    def run(self, max_cycles: int | None = None) -> SessionLog:
        """Repeat cycles until the user stops, or run exactly ``max_cycles``.

        With ``max_cycles`` set the "continue?" question is never asked.
        """
        logger = get_logger()
        completed = 0
        while True:
            self.run_cycle()
            completed += 1
            if max_cycles is not None:
                if completed >= max_cycles:
                    logger.info("Stopping after %d cycles", completed)
                    break
                continue
            if self.ask_continue() is not True:
                logger.info("User stopped after %d cycles", completed)
                break
        return self.log
