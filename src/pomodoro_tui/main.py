"""Main entry point for Pomodoro TUI."""

from typing import Optional

import typer

from pomodoro_tui import __version__
from pomodoro_tui.config import get_config_manager
from pomodoro_tui.exceptions import TaskFileError, TerminalError
from pomodoro_tui.loop import run_app
from pomodoro_tui.models.app_state import AppState, StudyMode, parse_focus_mode
from pomodoro_tui.storage.task_file import load_tasks
from pomodoro_tui.utils.exit_codes import ERROR_IO, ERROR_TERMINAL
from pomodoro_tui.utils.logger import get_logger, log_file_path
from pomodoro_tui.utils.ui.console import get_console, print_error

app = typer.Typer(
    name="pomodoro",
    help="A Pomodoro timer and task list for the terminal",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro TUI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
def run(
    pomodoro_time: Optional[int] = typer.Option(
        None, "--pomodoro-time", "-p", min=1, help="Pomodoro timer length in minutes [default: 25]"
    ),
    short_break_time: Optional[int] = typer.Option(
        None, "--short-break-time", "-s", min=1, help="Short break length in minutes [default: 5]"
    ),
    long_break_time: Optional[int] = typer.Option(
        None, "--long-break-time", "-l", min=1, help="Long break length in minutes [default: 15]"
    ),
    task_file_path: Optional[str] = typer.Option(
        None, "--task-file-path", "-t", help="Path to tasks file [default: tasks]"
    ),
    focus_mode: Optional[str] = typer.Option(
        None, "--focus-mode", "-f", help="Open in zen mode when 'true' [default: false]"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Start the timer and task list."""
    logger = get_logger()

    zen = None
    if focus_mode is not None:
        zen = parse_focus_mode(focus_mode) is StudyMode.ZEN

    settings = get_config_manager().resolve(
        pomodoro_minutes=pomodoro_time,
        short_break_minutes=short_break_time,
        long_break_minutes=long_break_time,
        task_file_path=task_file_path,
        focus_mode=zen,
    )

    tasks = load_tasks(settings.task_file_path)
    state = AppState.from_settings(settings, tasks)
    logger.info(
        "Session started (%s/%s/%s min, %d task(s))",
        settings.pomodoro_minutes,
        settings.short_break_minutes,
        settings.long_break_minutes,
        len(tasks),
    )

    try:
        run_app(state, console)
    except TaskFileError as e:
        logger.error("Save failed: %s", e)
        print_error(str(e), console)
        console.print(f"[dim]Log: {log_file_path()}[/dim]")
        raise typer.Exit(ERROR_IO) from e
    except TerminalError as e:
        logger.error("Terminal error: %s", e)
        print_error(str(e), console)
        raise typer.Exit(ERROR_TERMINAL) from e

    logger.info("Session ended")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
