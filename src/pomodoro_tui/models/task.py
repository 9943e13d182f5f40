"""Task data model."""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A task tracked alongside the timer."""

    title: str = ""
    pomodoros_expected: int = Field(default=0, ge=0)
    pomodoros_completed: int = Field(default=0, ge=0)
    completed: bool = False

    def toggle_completed(self) -> None:
        self.completed = not self.completed

    def complete_pomodoro(self) -> None:
        self.pomodoros_completed += 1

    def negate_pomodoro(self) -> None:
        """Take back one pomodoro; never goes below zero."""
        if self.pomodoros_completed > 0:
            self.pomodoros_completed -= 1

    def list_line(self) -> str:
        """Format the task as a single line for the task list."""
        mark = "x" if self.completed else " "
        return (
            f"[{mark}] | {self.pomodoros_completed}/{self.pomodoros_expected}"
            f" - {self.title}"
        )
