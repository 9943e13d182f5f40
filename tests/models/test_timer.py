"""Unit tests for the countdown timer state machine."""

from __future__ import annotations

import pytest

from pomodoro_tui.config import Settings
from pomodoro_tui.models.timer import (
    PomodoroMode,
    Timer,
    calculate_percentage,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestTimerInit:
    def test_new_timer_is_paused_and_full(self):
        timer = Timer(1500, PomodoroMode.POMODORO)

        assert timer.status == "paused"
        assert timer.time_remaining == 1500
        assert timer.total_time == 1500
        assert timer.percentage == 0
        assert timer.mode is PomodoroMode.POMODORO

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            Timer(-1)

    def test_for_mode_uses_configured_minutes(self):
        settings = Settings(pomodoro_minutes=50, short_break_minutes=10, long_break_minutes=20)

        assert Timer.for_mode(PomodoroMode.POMODORO, settings).total_time == 3000
        assert Timer.for_mode(PomodoroMode.SHORT_BREAK, settings).total_time == 600
        assert Timer.for_mode(PomodoroMode.LONG_BREAK, settings).total_time == 1200

    def test_for_mode_sets_mode(self):
        timer = Timer.for_mode(PomodoroMode.LONG_BREAK, Settings())
        assert timer.mode is PomodoroMode.LONG_BREAK


# ---------------------------------------------------------------------------
# tick()
# ---------------------------------------------------------------------------


class TestTick:
    def test_tick_decrements_one_second(self):
        timer = Timer(10)
        timer.tick()
        assert timer.time_remaining == 9

    def test_tick_updates_percentage(self):
        timer = Timer(4)
        timer.tick()
        assert timer.percentage == 25

    def test_tick_from_one_reaches_zero(self):
        timer = Timer(1)
        more = timer.tick()

        assert timer.time_remaining == 0
        assert timer.is_finished
        assert more is False
        assert timer.percentage == 100

    def test_tick_returns_true_while_time_remains(self):
        timer = Timer(3)
        assert timer.tick() is True

    def test_tick_on_finished_timer_raises(self):
        timer = Timer(1)
        timer.tick()
        with pytest.raises(ValueError):
            timer.tick()

    def test_percentage_monotonic_and_bounded(self):
        timer = Timer(97)
        previous = timer.percentage
        while not timer.is_finished:
            timer.tick()
            assert 0 <= timer.percentage <= 100
            assert timer.percentage >= previous
            previous = timer.percentage


class TestCalculatePercentage:
    @pytest.mark.parametrize(
        "total, remaining, expected",
        [
            (100, 100, 0),
            (100, 0, 100),
            (1500, 750, 50),
            (3, 2, 33),
            (3, 1, 67),
        ],
    )
    def test_values(self, total, remaining, expected):
        assert calculate_percentage(total, remaining) == expected

    def test_zero_total_is_zero(self):
        assert calculate_percentage(0, 0) == 0

    def test_clamped(self):
        assert calculate_percentage(10, 20) == 0
        assert calculate_percentage(10, -5) == 100


# ---------------------------------------------------------------------------
# pause / unpause
# ---------------------------------------------------------------------------


class TestPause:
    def test_unpause_plays(self):
        timer = Timer(10)
        timer.unpause()
        assert timer.status == "playing"
        assert timer.is_playing

    def test_pause_is_idempotent(self):
        timer = Timer(10)
        timer.pause()
        timer.pause()
        assert timer.status == "paused"

    def test_unpause_is_idempotent(self):
        timer = Timer(10)
        timer.unpause()
        timer.unpause()
        assert timer.status == "playing"

    def test_toggle_flips(self):
        timer = Timer(10)
        timer.toggle()
        assert timer.status == "playing"
        timer.toggle()
        assert timer.status == "paused"

    def test_pause_keeps_remaining(self):
        timer = Timer(10)
        timer.tick()
        timer.pause()
        assert timer.time_remaining == 9


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_mm_ss_under_an_hour(self):
        assert Timer(25 * 60).format_remaining() == "25:00"

    def test_mm_ss_pads(self):
        assert Timer(65).format_remaining() == "01:05"

    def test_zero(self):
        timer = Timer(1)
        timer.tick()
        assert timer.format_remaining() == "00:00"

    def test_just_under_an_hour(self):
        assert Timer(3599).format_remaining() == "59:59"

    def test_exactly_an_hour_uses_hours(self):
        assert Timer(3600).format_remaining() == "01:00:00"

    def test_hh_mm_ss(self):
        assert Timer(2 * 3600 + 5 * 60 + 9).format_remaining() == "02:05:09"


class TestPomodoroMode:
    def test_display_names(self):
        assert PomodoroMode.POMODORO.display_name == "Pomodoro"
        assert PomodoroMode.SHORT_BREAK.display_name == "Short Break"
        assert PomodoroMode.LONG_BREAK.display_name == "Long Break"

    def test_str_is_display_name(self):
        assert str(PomodoroMode.SHORT_BREAK) == "Short Break"
