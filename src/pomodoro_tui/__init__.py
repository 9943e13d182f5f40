"""Pomodoro TUI - a terminal Pomodoro timer with a lightweight task list."""

__version__ = "0.1.0"
