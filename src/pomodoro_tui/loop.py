"""The tick-driven draw / poll / dispatch loop."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.console import Console, RenderableType
from rich.live import Live

from pomodoro_tui.models.app_state import AppState
from pomodoro_tui.models.timer import PomodoroMode
from pomodoro_tui.storage.task_file import save_tasks
from pomodoro_tui.ui.keyboard import KeyboardHandler
from pomodoro_tui.ui.keymap import Action, resolve_action
from pomodoro_tui.ui.renderer import Renderer
from pomodoro_tui.utils.logger import get_logger

# Seconds between timer ticks; matches the timer's one-second resolution.
TICK_INTERVAL = 1.0

_MODE_ACTIONS = {
    Action.POMODORO: PomodoroMode.POMODORO,
    Action.SHORT_BREAK: PomodoroMode.SHORT_BREAK,
    Action.LONG_BREAK: PomodoroMode.LONG_BREAK,
}


class RenderLoop:
    """Owns the application state for the length of a session.

    Each iteration draws a frame, waits for a key for no longer than what is
    left of the current tick, applies the key, then ticks the timer once the
    tick interval has passed.
    """

    def __init__(
        self,
        state: AppState,
        keyboard: KeyboardHandler,
        draw: Callable[[RenderableType], None],
        renderer: Renderer | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = TICK_INTERVAL,
        keymap: dict[str, Action] | None = None,
    ):
        self.state = state
        self.keyboard = keyboard
        self.draw = draw
        self.renderer = renderer or Renderer()
        self.clock = clock
        self.tick_interval = tick_interval
        self.keymap = keymap
        self.logger = get_logger()

    def poll_timeout(self, last_tick: float) -> float:
        """Seconds left before the next tick is due, never negative."""
        return max(0.0, self.tick_interval - (self.clock() - last_tick))

    def run(self) -> None:
        """Run until the quit action.

        Raises:
            TaskFileError: if saving tasks fails.
        """
        self.state.tasks.next()
        last_tick = self.clock()

        while True:
            self.draw(self.renderer.render(self.state))

            key = self.keyboard.get_key(self.poll_timeout(last_tick))
            if key is not None:
                action = resolve_action(key, self.keymap)
                if action is Action.QUIT:
                    self.logger.info("Quit requested")
                    return
                if action is not None:
                    self.dispatch(action)

            now = self.clock()
            if now - last_tick >= self.tick_interval:
                timer = self.state.timer
                if timer.is_playing and timer.time_remaining != 0:
                    timer.tick()
                    if timer.is_finished:
                        self.logger.info("%s timer finished", timer.mode.display_name)
                # Paused time is not owed back: no catch-up ticks.
                last_tick = now

    def dispatch(self, action: Action) -> None:
        """Apply one action to the state."""
        state = self.state

        if action is Action.TOGGLE_PAUSE:
            state.timer.toggle()
        elif action is Action.RESET_TIMER:
            state.reset_timer()
            self.logger.debug("Timer reset (%s)", state.timer.mode.value)
        elif action in _MODE_ACTIONS:
            state.switch_mode(_MODE_ACTIONS[action])
            self.logger.debug("Switched to %s", state.timer.mode.value)
        elif action is Action.TOGGLE_STUDY_MODE:
            state.toggle_study_mode()
        elif action is Action.LIST_PREVIOUS:
            state.tasks.previous()
        elif action is Action.LIST_NEXT:
            state.tasks.next()
        elif action is Action.TOGGLE_TASK_COMPLETE:
            task = state.selected_task()
            if task is not None:
                task.toggle_completed()
        elif action is Action.INCREMENT_POMODORO:
            task = state.selected_task()
            if task is not None:
                task.complete_pomodoro()
        elif action is Action.DECREMENT_POMODORO:
            task = state.selected_task()
            if task is not None:
                task.negate_pomodoro()
        elif action is Action.SAVE_TASKS:
            save_tasks(state.settings.task_file_path, state.tasks.items)
        elif action is Action.TOGGLE_HELP:
            state.toggle_help()


def run_app(state: AppState, console: Console | None = None) -> None:
    """Run a full-screen session, restoring the terminal however it ends."""
    console = console or Console()
    renderer = Renderer()
    logger = get_logger()

    with KeyboardHandler() as keyboard:
        with Live(
            renderer.render(state),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:

            def draw(renderable: RenderableType) -> None:
                live.update(renderable, refresh=True)

            loop = RenderLoop(state, keyboard, draw, renderer=renderer)
            try:
                loop.run()
            except KeyboardInterrupt:
                logger.info("Interrupted, leaving session")
