"""Key bindings for the interactive session."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Everything a key press can do."""

    TOGGLE_PAUSE = "toggle_pause"
    RESET_TIMER = "reset_timer"
    POMODORO = "pomodoro"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"
    TOGGLE_STUDY_MODE = "toggle_study_mode"
    LIST_PREVIOUS = "list_previous"
    LIST_NEXT = "list_next"
    TOGGLE_TASK_COMPLETE = "toggle_task_complete"
    INCREMENT_POMODORO = "increment_pomodoro"
    DECREMENT_POMODORO = "decrement_pomodoro"
    SAVE_TASKS = "save_tasks"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"


# Keys are case-sensitive: "s" is a short break, "S" saves.
DEFAULT_KEYMAP: dict[str, Action] = {
    "space": Action.TOGGLE_PAUSE,
    "r": Action.RESET_TIMER,
    "p": Action.POMODORO,
    "s": Action.SHORT_BREAK,
    "l": Action.LONG_BREAK,
    "f": Action.TOGGLE_STUDY_MODE,
    "k": Action.LIST_PREVIOUS,
    "up": Action.LIST_PREVIOUS,
    "j": Action.LIST_NEXT,
    "down": Action.LIST_NEXT,
    "enter": Action.TOGGLE_TASK_COMPLETE,
    "+": Action.INCREMENT_POMODORO,
    "-": Action.DECREMENT_POMODORO,
    "S": Action.SAVE_TASKS,
    "?": Action.TOGGLE_HELP,
    "q": Action.QUIT,
}

# (section, [(keys, description)]) rows for the help overlay.
HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Timer",
        [
            ("p", "Pomodoro timer"),
            ("s", "Short break timer"),
            ("l", "Long break timer"),
            ("Space", "Pause/Unpause timer"),
            ("r", "Reset timer"),
            ("f", "Toggle zen mode"),
        ],
    ),
    (
        "Tasks",
        [
            ("j/k", "Scroll task list"),
            ("S", "Save tasks"),
            ("Enter", "Mark/Unmark task as complete"),
            ("+/-", "Increase/Decrease pomodoros taken for task"),
        ],
    ),
    (
        "Misc",
        [
            ("?", "Toggle this help"),
            ("q", "Quit application"),
        ],
    ),
]


def resolve_action(key: str | None, keymap: dict[str, Action] | None = None) -> Action | None:
    """Look up the action bound to *key*; unknown keys map to None."""
    if key is None:
        return None
    return (keymap or DEFAULT_KEYMAP).get(key)
