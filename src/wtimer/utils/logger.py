"""Application-wide logger writing to platformdirs user_log_dir.

The level defaults to DEBUG and can be lowered or raised with the
``WTIMER_LOG_LEVEL`` environment variable (e.g. ``WTIMER_LOG_LEVEL=WARNING``).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "wtimer"
_LOG_FILE = "wtimer.log"
_LEVEL_ENV = "WTIMER_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    """Resolve WTIMER_LOG_LEVEL to a logging level, DEBUG when unset or unknown."""
    name = os.environ.get(_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.DEBUG
    return level if isinstance(level, int) else logging.DEBUG


def _file_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h
        for h in logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


def get_logger() -> logging.Logger:
    """Return the singleton timer logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())

    # Other handlers (e.g. a test runner's capture handler) may already be
    # attached; only the rotating file handler is ours to add.
    if not _file_handlers(logger):
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
