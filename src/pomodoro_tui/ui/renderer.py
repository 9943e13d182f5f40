"""Full-screen layout for the timer and task list."""

from __future__ import annotations

from functools import lru_cache

from pyfiglet import Figlet
from rich.align import Align
from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from pomodoro_tui.models.app_state import AppState, StudyMode
from pomodoro_tui.models.stateful_list import StatefulList
from pomodoro_tui.models.task import Task
from pomodoro_tui.models.timer import Timer

from .keymap import HELP_SECTIONS

ENCOURAGEMENT = "Keep it up, you got this!"
HELP_WIDTH = 60


@lru_cache(maxsize=1)
def _figlet() -> Figlet:
    return Figlet(font="standard")


def render_ascii_text(text: str) -> str:
    """Render *text* as large ASCII-art glyphs."""
    return _figlet().renderText(text)


class Renderer:
    """Builds a rich layout from application state without changing it."""

    def render(self, state: AppState) -> Layout:
        """Create the frame for the current state."""
        layout = Layout(name="root")

        if state.study_mode is StudyMode.ZEN:
            body = Panel(
                self._create_zen_content(state.timer),
                title=self._title(state.timer),
            )
            layout.update(body)
        else:
            layout.split_column(
                Layout(name="timer", ratio=60),
                Layout(name="tasks", ratio=40),
            )
            layout["timer"].update(
                Panel(
                    Align.center(self._create_timer_text(state.timer), vertical="middle"),
                    title=self._title(state.timer),
                )
            )
            layout["tasks"].update(
                Panel(self._create_task_list(state.tasks), title="Tasks")
            )

        if state.show_help_menu:
            framed = Layout(name="framed")
            framed.split_column(
                layout,
                Layout(
                    Align.center(self._create_help_panel()),
                    name="help",
                    size=self._help_height(),
                ),
            )
            return framed

        return layout

    def _title(self, timer: Timer) -> str:
        return f"{timer.mode.display_name} - Press ? for help"

    def _create_timer_text(self, timer: Timer) -> Text:
        style = "bold yellow" if timer.status == "paused" else "bold cyan"
        text = Text(
            render_ascii_text(timer.format_remaining()), style=style, justify="center"
        )
        text.append(ENCOURAGEMENT, style="italic")
        return text

    def _create_zen_content(self, timer: Timer) -> RenderableType:
        gauge = ProgressBar(total=100, completed=timer.percentage)
        return Align.center(
            Group(
                self._create_timer_text(timer),
                Text(""),
                gauge,
                Text(f"{timer.percentage}%", justify="center", style="dim"),
            ),
            vertical="middle",
        )

    def _create_task_list(self, tasks: StatefulList[Task]) -> RenderableType:
        if not tasks.items:
            return Text("No tasks", style="dim")

        selected = tasks.selected()
        lines = Text()
        for index, task in enumerate(tasks.items):
            if index:
                lines.append("\n")
            style = "bright_green" if index == selected else ""
            lines.append(task.list_line(), style=style)
        return lines

    def _create_help_panel(self) -> Panel:
        table = Table.grid(padding=(0, 1))
        table.add_column(style="bold", no_wrap=True)
        table.add_column()

        for i, (section, rows) in enumerate(HELP_SECTIONS):
            if i:
                table.add_row("", "")
            table.add_row(Text(f"{section}:", style="underline"), "")
            for keys, description in rows:
                table.add_row(f"{keys}:", description)

        return Panel(table, title="Controls", width=HELP_WIDTH)

    def _help_height(self) -> int:
        # heading per section, blank line between sections, two borders
        rows = sum(len(entries) + 1 for _, entries in HELP_SECTIONS)
        return rows + len(HELP_SECTIONS) - 1 + 2
