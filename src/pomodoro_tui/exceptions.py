"""Exception hierarchy for Pomodoro TUI."""

from pathlib import Path


class PomodoroError(Exception):
    """Base exception for all application errors."""


class TaskFileError(PomodoroError):
    """Raised when the task file cannot be written."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not save tasks to {self.path}: {reason}")


class TerminalError(PomodoroError):
    """Raised when the terminal cannot be put into (or restored from) raw mode."""
