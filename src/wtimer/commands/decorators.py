"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from wtimer.models.exceptions import PersistenceWriteError
from wtimer.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_PERSISTENCE,
    INTERRUPTED,
    get_exit_code_description,
    get_exit_code_name,
)
from wtimer.utils.logger import get_logger
from wtimer.utils.ui.formatters import format_error, format_warning


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_label(code: int) -> str:
    return f"{get_exit_code_name(code)} ({get_exit_code_description(code)})"


def command_wrapper(func: Callable):
    """Log a command's lifetime and turn failures into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            logger.error(
                "command failed: %s -> %s - %s", cmd, _exit_code_label(e.exit_code), e
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except PersistenceWriteError as e:
            logger.error(
                "command failed: %s -> %s - %s",
                cmd,
                _exit_code_label(ERROR_PERSISTENCE),
                e,
            )
            format_error(str(e))
            raise typer.Exit(code=ERROR_PERSISTENCE) from e

        except KeyboardInterrupt as e:
            logger.info(
                "command interrupted: %s -> %s", cmd, _exit_code_label(INTERRUPTED)
            )
            format_warning("Interrupted")
            raise typer.Exit(code=INTERRUPTED) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) -> %s - %s\n%s",
                cmd,
                elapsed,
                _exit_code_label(ERROR_GENERAL),
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
