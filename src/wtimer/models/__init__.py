"""Core timer models: durations, the interval scheduler and session history."""

from .duration import Duration
from .exceptions import (
    ConfigLoadError,
    ContractViolation,
    HistoryLoadError,
    PersistenceWriteError,
    WtimerError,
)
from .history import HistoryStore, SessionEntry, SessionLog
from .pomodoro import IntervalScheduler, PomodoroConfig

__all__ = [
    "Duration",
    "PomodoroConfig",
    "IntervalScheduler",
    "SessionEntry",
    "SessionLog",
    "HistoryStore",
    "WtimerError",
    "ConfigLoadError",
    "HistoryLoadError",
    "PersistenceWriteError",
    "ContractViolation",
]
