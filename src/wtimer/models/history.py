"""Day-scoped session history with JSON file storage."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from wtimer.utils.logger import get_logger

from .duration import ZERO, Duration
from .exceptions import HistoryLoadError, PersistenceWriteError


@dataclass(frozen=True)
class SessionEntry:
    """Measured durations of one completed work/rest cycle."""

    work: Duration
    rest: Duration

    def to_dict(self) -> dict:
        return {
            "work_interval": self.work.to_dict(),
            "rest_interval": self.rest.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> SessionEntry:
        return cls(
            work=Duration.from_dict(data["work_interval"]),
            rest=Duration.from_dict(data["rest_interval"]),
        )


@dataclass
class SessionLog:
    """Completed cycles for one calendar day, in chronological order."""

    date: date
    entries: list[SessionEntry] = field(default_factory=list)

    @classmethod
    def for_today(cls, today: date | None = None) -> SessionLog:
        """Create an empty log dated today."""
        return cls(date=today or date.today())

    def is_for_today(self, today: date | None = None) -> bool:
        """Check whether the log belongs to the current local calendar day."""
        return self.date == (today or date.today())

    def append(self, entry: SessionEntry) -> None:
        self.entries.append(entry)

    def length(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def total_work(self) -> Duration:
        return sum((e.work for e in self.entries), ZERO)

    def total_rest(self) -> Duration:
        return sum((e.rest for e in self.entries), ZERO)

    def snapshot(self) -> SessionLog:
        """Independent copy safe to hand to a writer."""
        return SessionLog(date=self.date, entries=copy.copy(self.entries))

    def to_dict(self) -> dict:
        """Convert to dictionary for persistence."""
        return {
            "date": self.date.isoformat(),
            "intervals": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict) -> SessionLog:
        """Create from dictionary."""
        return cls(
            date=date.fromisoformat(data["date"]),
            entries=[SessionEntry.from_dict(item) for item in data["intervals"]],
        )


class HistoryStore:
    """Reads and overwrites the history file.

    Only today's log is ever kept: a stored log from another day, or one that
    cannot be parsed, is dropped and replaced by an empty log for today.
    Every save rewrites the whole file.
    """

    def __init__(
        self,
        path: Path | None = None,
        today: Callable[[], date] | None = None,
    ):
        if path is None:
            from platformdirs import user_data_dir

            path = Path(user_data_dir("wtimer")) / "history.json"

        self.path = Path(path)
        self._today = today or date.today

    def _read(self) -> SessionLog:
        """Parse the stored log, raising HistoryLoadError when unusable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise HistoryLoadError(f"No history file at {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise HistoryLoadError(f"Cannot read {self.path}: {e}") from e

        try:
            log = SessionLog.from_dict(json.loads(text))
        except (
            json.JSONDecodeError,
            TypeError,
            KeyError,
            ValueError,
            OverflowError,
        ) as e:
            raise HistoryLoadError(f"Corrupt history in {self.path}: {e}") from e

        if not log.is_for_today(self._today()):
            raise HistoryLoadError(
                f"History in {self.path} is from {log.date.isoformat()}"
            )
        return log

    def load(self) -> SessionLog:
        """Load today's log, or start an empty one."""
        logger = get_logger()
        try:
            log = self._read()
        except HistoryLoadError as e:
            logger.info("Starting a new history log: %s", e)
            return SessionLog.for_today(self._today())

        logger.debug("Loaded %d history entries from %s", len(log), self.path)
        return log

    def save(self, log: SessionLog) -> None:
        """Overwrite the history file with a snapshot of ``log``."""
        try:
            payload = json.dumps(log.snapshot().to_dict(), indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceWriteError(
                f"Failed to write history to {self.path}: {e}"
            ) from e

        get_logger().debug("Saved %d history entries to %s", len(log), self.path)
