"""Pomodoro TUI domain models.

The timer state machine, the selectable list cursor, the task record and the
application state aggregate that the render loop owns.
"""

from .app_state import AppState, StudyMode, parse_focus_mode
from .stateful_list import StatefulList
from .task import Task
from .timer import PomodoroMode, Timer, TimerStatus

__all__ = [
    "AppState",
    "PomodoroMode",
    "StatefulList",
    "StudyMode",
    "Task",
    "Timer",
    "TimerStatus",
    "parse_focus_mode",
]
