"""Custom exceptions for wtimer."""


class WtimerError(Exception):
    """Base exception for all wtimer errors."""


class ConfigLoadError(WtimerError):
    """Raised when the pomodoro configuration is missing or corrupt."""


class HistoryLoadError(WtimerError):
    """Raised when the stored history is missing, corrupt or stale."""


class PersistenceWriteError(WtimerError):
    """Raised when a file cannot be overwritten with the current snapshot."""


class ContractViolation(WtimerError):
    """Raised when scheduler calls break the work/rest alternation."""
