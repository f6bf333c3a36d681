"""Shared test fixtures and configuration.

Keeps the application logger and config service away from the real
user directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest


def _drop_file_handlers() -> None:
    logger = logging.getLogger("wtimer")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path, monkeypatch):
    """Point the application logger at a temporary log directory."""
    import wtimer.utils.logger as logger_mod

    log_dir = tmp_path / "logs"
    monkeypatch.delenv("WTIMER_LOG_LEVEL", raising=False)
    logger_mod._logger = None
    _drop_file_handlers()

    with patch("wtimer.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir

    _drop_file_handlers()
    logger_mod._logger = None


@pytest.fixture()
def read_log(isolated_logger):
    """Flush the log file handler and return the log file's text."""

    def _read() -> str:
        for handler in logging.getLogger("wtimer").handlers:
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                handler.flush()
        return (isolated_logger / "wtimer.log").read_text(encoding="utf-8")

    return _read


@pytest.fixture(autouse=True)
def fresh_config_service():
    """Drop cached ConfigService instances between tests."""
    from wtimer.services.config_service import get_config_service

    get_config_service.cache_clear()
    yield
    get_config_service.cache_clear()


@pytest.fixture()
def config_path(tmp_path):
    """Path of a (not yet existing) pomodoro.json."""
    return tmp_path / "config" / "pomodoro.json"


@pytest.fixture()
def history_path(tmp_path):
    """Path of a (not yet existing) history.json."""
    return tmp_path / "data" / "history.json"
