"""Countdown timer state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pomodoro_tui.config import Settings

TimerStatus = Literal["playing", "paused"]

ONE_HOUR = 60 * 60


class PomodoroMode(str, Enum):
    """Which configured duration a timer counts down."""

    POMODORO = "pomodoro"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def display_name(self) -> str:
        return {
            PomodoroMode.POMODORO: "Pomodoro",
            PomodoroMode.SHORT_BREAK: "Short Break",
            PomodoroMode.LONG_BREAK: "Long Break",
        }[self]

    def __str__(self) -> str:
        return self.display_name


def calculate_percentage(total_time: int, time_remaining: int) -> int:
    """Return the elapsed share of *total_time* as an integer in [0, 100]."""
    if total_time <= 0:
        return 0
    pct = round(100 * (1 - time_remaining / total_time))
    return max(0, min(100, pct))


@dataclass
class Timer:
    """A single countdown.

    Timers are never reconfigured: switching mode or resetting builds a new
    one and the old instance is dropped along with its progress.
    """

    total_time: int  # seconds
    mode: PomodoroMode = PomodoroMode.POMODORO
    status: TimerStatus = "paused"
    time_remaining: int = field(init=False)
    percentage: int = field(init=False, default=0)

    def __post_init__(self):
        if self.total_time < 0:
            raise ValueError("total_time must be non-negative")
        self.time_remaining = self.total_time
        self.percentage = 0

    @classmethod
    def for_mode(cls, mode: PomodoroMode, settings: Settings) -> Timer:
        """Create a fresh paused timer at the configured duration for *mode*."""
        return cls(settings.duration_for(mode), mode)

    def tick(self) -> bool:
        """
        Count down one second.

        The caller must check ``time_remaining`` first; ticking a finished
        timer is a programming error.

        Returns True while time remains after the tick.
        """
        if self.time_remaining <= 0:
            raise ValueError("tick() called on a finished timer")
        self.time_remaining -= 1
        self.percentage = calculate_percentage(self.total_time, self.time_remaining)
        return self.time_remaining != 0

    def pause(self) -> None:
        self.status = "paused"

    def unpause(self) -> None:
        self.status = "playing"

    def toggle(self) -> None:
        """Flip between playing and paused."""
        if self.status == "paused":
            self.unpause()
        else:
            self.pause()

    @property
    def is_playing(self) -> bool:
        return self.status == "playing"

    @property
    def is_finished(self) -> bool:
        return self.time_remaining == 0

    # Formatting

    def mm_ss(self) -> str:
        mins = (self.time_remaining // 60) % 60
        secs = self.time_remaining % 60
        return f"{mins:02d}:{secs:02d}"

    def hh_mm_ss(self) -> str:
        hours = self.time_remaining // ONE_HOUR
        return f"{hours:02d}:{self.mm_ss()}"

    def format_remaining(self) -> str:
        """MM:SS under an hour, HH:MM:SS otherwise."""
        if self.time_remaining >= ONE_HOUR:
            return self.hh_mm_ss()
        return self.mm_ss()
