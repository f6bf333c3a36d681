"""Unit tests for PomodoroConfig and the IntervalScheduler state machine."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wtimer.models.duration import Duration
from wtimer.models.exceptions import ContractViolation
from wtimer.models.pomodoro import IntervalScheduler, PomodoroConfig


# ---------------------------------------------------------------------------
# PomodoroConfig
# ---------------------------------------------------------------------------


class TestPomodoroConfig:
    """Tests for PomodoroConfig defaults and validation."""

    def test_default_values(self) -> None:
        config = PomodoroConfig()

        assert config.work_duration == 25
        assert config.short_break_duration == 5
        assert config.long_break_duration == 15
        assert config.cycles_before_long_break == 3

    def test_duration_accessors(self) -> None:
        config = PomodoroConfig(work_duration=50, short_break_duration=10)

        assert config.work == Duration.from_minutes(50)
        assert config.short_rest == Duration.from_minutes(10)
        assert config.long_rest == Duration.from_minutes(15)

    @pytest.mark.parametrize(
        "field",
        [
            "work_duration",
            "short_break_duration",
            "long_break_duration",
            "cycles_before_long_break",
        ],
    )
    def test_non_positive_values_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            PomodoroConfig(**{field: 0})

    def test_is_frozen(self) -> None:
        config = PomodoroConfig()

        with pytest.raises(ValidationError):
            config.work_duration = 10  # type: ignore[misc]

    def test_unknown_keys_ignored(self) -> None:
        """Older files also stored the running cycle counter."""
        config = PomodoroConfig.model_validate_json(
            '{"work_duration":25,"short_break_duration":5,"long_break_duration":15,'
            '"cycles_before_long_break":3,"current_cycles_amount":0}'
        )

        assert config == PomodoroConfig()


# ---------------------------------------------------------------------------
# IntervalScheduler
# ---------------------------------------------------------------------------


def _cycle(scheduler: IntervalScheduler) -> tuple[Duration, int, Duration, int]:
    work = scheduler.next_work_interval()
    after_work = scheduler.completed_work_cycles
    rest = scheduler.next_rest_interval()
    return work, after_work, rest, scheduler.completed_work_cycles


class TestIntervalScheduler:
    """Tests for the work/rest cadence."""

    def test_initial_state(self) -> None:
        scheduler = IntervalScheduler()

        assert scheduler.completed_work_cycles == 0
        assert scheduler.phase == "work"
        assert scheduler.config == PomodoroConfig()

    def test_work_interval_always_configured_length(self) -> None:
        scheduler = IntervalScheduler(PomodoroConfig(work_duration=40))

        for _ in range(5):
            assert scheduler.next_work_interval() == Duration.from_minutes(40)
            scheduler.next_rest_interval()

    def test_default_scenario_three_cycles(self) -> None:
        scheduler = IntervalScheduler(
            PomodoroConfig(
                work_duration=25,
                short_break_duration=5,
                long_break_duration=15,
                cycles_before_long_break=3,
            )
        )

        rests = []
        counters = []
        for _ in range(3):
            scheduler.next_work_interval()
            counters.append(scheduler.completed_work_cycles)
            rests.append(scheduler.next_rest_interval().as_mins())

        assert rests == [5, 5, 15]
        assert counters == [1, 2, 3]
        assert scheduler.completed_work_cycles == 0

    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    def test_nth_rest_is_long_and_resets(self, n: int) -> None:
        config = PomodoroConfig(cycles_before_long_break=n)
        scheduler = IntervalScheduler(config)

        for i in range(1, n + 1):
            _, after_work, rest, after_rest = _cycle(scheduler)
            assert after_work == i
            if i < n:
                assert rest == config.short_rest
                assert after_rest == i
            else:
                assert rest == config.long_rest
                assert after_rest == 0

    def test_cadence_repeats_after_long_break(self) -> None:
        scheduler = IntervalScheduler(PomodoroConfig(cycles_before_long_break=2))

        rests = [_cycle(scheduler)[2].as_mins() for _ in range(6)]

        assert rests == [5, 15, 5, 15, 5, 15]

    def test_counter_never_exceeds_threshold(self) -> None:
        config = PomodoroConfig(cycles_before_long_break=3)
        scheduler = IntervalScheduler(config)

        for _ in range(20):
            scheduler.next_work_interval()
            assert 0 <= scheduler.completed_work_cycles <= 3
            scheduler.next_rest_interval()

    def test_peek_does_not_mutate(self) -> None:
        scheduler = IntervalScheduler(PomodoroConfig(cycles_before_long_break=1))
        scheduler.next_work_interval()

        assert scheduler.peek_rest_interval() == Duration.from_minutes(15)
        assert scheduler.completed_work_cycles == 1
        assert scheduler.phase == "rest"
        assert scheduler.next_rest_interval() == Duration.from_minutes(15)

    def test_phase_alternates(self) -> None:
        scheduler = IntervalScheduler()

        scheduler.next_work_interval()
        assert scheduler.phase == "rest"
        scheduler.next_rest_interval()
        assert scheduler.phase == "work"


class TestIntervalSchedulerContract:
    """Out-of-turn calls are programming errors."""

    def test_rest_before_work_raises(self) -> None:
        scheduler = IntervalScheduler()

        with pytest.raises(ContractViolation):
            scheduler.next_rest_interval()

    def test_two_work_calls_raise(self) -> None:
        scheduler = IntervalScheduler()
        scheduler.next_work_interval()

        with pytest.raises(ContractViolation):
            scheduler.next_work_interval()

    def test_two_rest_calls_raise(self) -> None:
        scheduler = IntervalScheduler()
        scheduler.next_work_interval()
        scheduler.next_rest_interval()

        with pytest.raises(ContractViolation):
            scheduler.next_rest_interval()

    def test_violation_leaves_state_unchanged(self) -> None:
        scheduler = IntervalScheduler()
        scheduler.next_work_interval()

        with pytest.raises(ContractViolation):
            scheduler.next_work_interval()

        assert scheduler.completed_work_cycles == 1
        assert scheduler.phase == "rest"
