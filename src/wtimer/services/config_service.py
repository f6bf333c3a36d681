"""Configuration service for the pomodoro settings file.

Loading never fails: a missing file means defaults, and a file that cannot be
read or validated is reported to the log and replaced by defaults in memory.
Saving does fail loudly, since a write that silently did nothing would lose
the user's change.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from wtimer.models.exceptions import ConfigLoadError, PersistenceWriteError
from wtimer.models.pomodoro import PomodoroConfig
from wtimer.utils.logger import get_logger


class ConfigService:
    """Loads, edits and saves the PomodoroConfig file."""

    def __init__(self, path: Path | None = None):
        if path is None:
            path = Path(user_config_dir("wtimer")) / "pomodoro.json"
        self.config_path = Path(path)
        self._config: PomodoroConfig | None = None

    @property
    def config(self) -> PomodoroConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def _read(self) -> PomodoroConfig:
        try:
            with open(self.config_path, encoding="utf-8") as f:
                return PomodoroConfig.model_validate_json(f.read())
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Cannot read {self.config_path}: {e}") from e
        except ValidationError as e:
            raise ConfigLoadError(
                f"Invalid configuration in {self.config_path}: {e}"
            ) from e

    def load_config(self) -> PomodoroConfig:
        """Load configuration from disk, falling back to defaults."""
        if not self.config_path.exists():
            get_logger().debug(
                "No config at %s, using defaults", self.config_path
            )
            return PomodoroConfig()

        try:
            return self._read()
        except ConfigLoadError as e:
            get_logger().warning("%s; using defaults", e)
            return PomodoroConfig()

    def save_config(self, config: PomodoroConfig | None = None) -> None:
        """Write the configuration to disk."""
        if config is not None:
            self._config = config
        config = self.config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(config.model_dump_json(indent=4))
        except OSError as e:
            raise PersistenceWriteError(
                f"Failed to save config to {self.config_path}: {e}"
            ) from e

    def get(self, key: str) -> Any:
        """Get a configuration value by field name."""
        if key not in PomodoroConfig.model_fields:
            raise KeyError(key)
        return getattr(self.config, key)

    def set(self, key: str, value: Any) -> PomodoroConfig:
        """Validate and persist a single field.

        Raises:
            KeyError: If ``key`` is not a configuration field
            ValidationError: If ``value`` is not acceptable for ``key``
        """
        if key not in PomodoroConfig.model_fields:
            raise KeyError(key)

        data = self.config.model_dump()
        data[key] = value
        updated = PomodoroConfig.model_validate(data)
        self.save_config(updated)
        get_logger().info("Config %s set to %r", key, getattr(updated, key))
        return updated

    def reset(self) -> PomodoroConfig:
        """Restore and persist the default configuration."""
        self.save_config(PomodoroConfig())
        get_logger().info("Config reset to defaults")
        return self.config

    def as_json(self) -> str:
        return json.dumps(self.config.model_dump(), indent=2)


@lru_cache
def get_config_service(path: Path | None = None) -> ConfigService:
    """Get the shared ConfigService for ``path``."""
    return ConfigService(path)
