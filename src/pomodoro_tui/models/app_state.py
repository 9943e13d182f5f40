"""Application state owned by the render loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pomodoro_tui.config import Settings

from .stateful_list import StatefulList
from .task import Task
from .timer import PomodoroMode, Timer


class StudyMode(str, Enum):
    """Display mode: full interface or distraction-free timer only."""

    NORMAL = "normal"
    ZEN = "zen"

    def toggled(self) -> StudyMode:
        return StudyMode.ZEN if self is StudyMode.NORMAL else StudyMode.NORMAL


def parse_focus_mode(value: str | bool) -> StudyMode:
    """Map the --focus-mode flag to a study mode ("true" means zen)."""
    if isinstance(value, bool):
        return StudyMode.ZEN if value else StudyMode.NORMAL
    return StudyMode.ZEN if value.strip().lower() == "true" else StudyMode.NORMAL


@dataclass
class AppState:
    """Everything the loop mutates and the renderer reads."""

    settings: Settings
    timer: Timer
    tasks: StatefulList[Task] = field(default_factory=StatefulList)
    study_mode: StudyMode = StudyMode.NORMAL
    show_help_menu: bool = False

    @classmethod
    def from_settings(cls, settings: Settings, tasks: list[Task]) -> AppState:
        return cls(
            settings=settings,
            timer=Timer.for_mode(PomodoroMode.POMODORO, settings),
            tasks=StatefulList.with_items(tasks),
            study_mode=parse_focus_mode(settings.focus_mode),
        )

    def switch_mode(self, mode: PomodoroMode) -> None:
        """Replace the timer with a fresh one for *mode*."""
        self.timer = Timer.for_mode(mode, self.settings)

    def reset_timer(self) -> None:
        """Replace the timer with a fresh one for the current mode."""
        self.switch_mode(self.timer.mode)

    def toggle_study_mode(self) -> None:
        self.study_mode = self.study_mode.toggled()

    def toggle_help(self) -> None:
        self.show_help_menu = not self.show_help_menu

    def selected_task(self) -> Task | None:
        return self.tasks.selected_item()
