"""Pomodoro configuration and the work/rest interval scheduler."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .duration import Duration
from .exceptions import ContractViolation

Phase = Literal["work", "rest"]


class PomodoroConfig(BaseModel):
    """Interval lengths (minutes) and the long-break cadence."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    work_duration: PositiveInt = Field(default=25, description="Work minutes")
    short_break_duration: PositiveInt = Field(
        default=5, description="Short break minutes"
    )
    long_break_duration: PositiveInt = Field(
        default=15, description="Long break minutes"
    )
    cycles_before_long_break: PositiveInt = Field(
        default=3, description="Work intervals per long break"
    )

    @property
    def work(self) -> Duration:
        return Duration.from_minutes(self.work_duration)

    @property
    def short_rest(self) -> Duration:
        return Duration.from_minutes(self.short_break_duration)

    @property
    def long_rest(self) -> Duration:
        return Duration.from_minutes(self.long_break_duration)


class IntervalScheduler:
    """Hands out work and rest intervals in strict alternation.

    The scheduler counts completed work intervals. When the count reaches
    ``cycles_before_long_break`` the following rest is a long one and the
    count starts over; every other rest is short.
    """

    def __init__(self, config: PomodoroConfig | None = None):
        self.config = config or PomodoroConfig()
        self.completed_work_cycles = 0
        self._phase: Phase = "work"

    @property
    def phase(self) -> Phase:
        """The kind of interval expected next."""
        return self._phase

    def next_work_interval(self) -> Duration:
        """Start a work interval and count it towards the next long break."""
        if self._phase != "work":
            raise ContractViolation(
                "next_work_interval() called while a rest interval is pending"
            )
        if self.completed_work_cycles < self.config.cycles_before_long_break:
            self.completed_work_cycles += 1
        self._phase = "rest"
        return self.config.work

    def next_rest_interval(self) -> Duration:
        """Start a rest interval, granting a long break at the threshold."""
        if self._phase != "rest":
            raise ContractViolation(
                "next_rest_interval() called before a work interval"
            )
        rest = self.peek_rest_interval()
        if self.is_long_break_due():
            self.completed_work_cycles = 0
        self._phase = "work"
        return rest

    def peek_rest_interval(self) -> Duration:
        """Return the rest that next_rest_interval() would hand out."""
        if self.is_long_break_due():
            return self.config.long_rest
        return self.config.short_rest

    def is_long_break_due(self) -> bool:
        return self.completed_work_cycles == self.config.cycles_before_long_break
