"""Console utilities for Pomodoro TUI."""

from functools import lru_cache

from rich.console import Console
from rich.markup import escape


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def print_error(message: str, console: Console | None = None) -> None:
    """Report a fatal error after the full-screen display has closed."""
    console = console or get_console()
    console.print(f"[red]✗ {escape(message)}[/red]", highlight=False)
