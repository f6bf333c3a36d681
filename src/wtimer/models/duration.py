"""Whole-second durations with an hours/minutes/seconds wire format."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Duration:
    """An immutable, non-negative span of time in whole seconds."""

    seconds: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, int) or isinstance(self.seconds, bool):
            raise TypeError(f"Duration seconds must be an int, got {self.seconds!r}")
        if self.seconds < 0:
            raise ValueError(f"Duration cannot be negative: {self.seconds}")

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(int(seconds))

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(int(minutes) * 60)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Convert a timedelta, truncating any fractional second."""
        return cls(int(delta.total_seconds()))

    def to_seconds(self) -> int:
        return self.seconds

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def as_mins(self) -> int:
        """Whole minutes, rounded down."""
        return self.seconds // 60

    @property
    def hrs(self) -> int:
        return self.seconds // 3600

    @property
    def mins(self) -> int:
        return self.seconds % 3600 // 60

    @property
    def secs(self) -> int:
        return self.seconds % 60

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds < other.seconds

    def __str__(self) -> str:
        return f"{self.hrs:d}:{self.mins:02d}:{self.secs:02d}"

    def to_dict(self) -> dict:
        """Convert to the {hrs, mins, secs} decomposition used on disk."""
        return {"hrs": self.hrs, "mins": self.mins, "secs": self.secs}

    @classmethod
    def from_dict(cls, data: dict) -> Duration:
        """Create from a {hrs, mins, secs} mapping."""
        hrs = int(data["hrs"])
        mins = int(data["mins"])
        secs = int(data["secs"])
        if min(hrs, mins, secs) < 0:
            raise ValueError(f"Duration components cannot be negative: {data}")
        return cls(hrs * 3600 + mins * 60 + secs)


ZERO = Duration(0)
