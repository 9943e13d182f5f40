"""Keyboard input handler for the interactive session."""

import os
import select
import sys
import termios
import tty
from typing import Optional

from pomodoro_tui.exceptions import TerminalError

ESCAPE = "\x1b"
READ_SIZE = 32

# Escape sequences for the arrow keys we bind, after the leading ESC.
_ARROWS = {
    "[A": "up",
    "[B": "down",
    "OA": "up",
    "OB": "down",
}

_NAMED = {
    " ": "space",
    "\n": "enter",
    "\r": "enter",
}


def _escape_length(text: str) -> int:
    """Length of the escape sequence at the start of *text*.

    CSI (ESC [ params final) and SS3 (ESC O x) sequences are swallowed whole,
    as is ESC plus one character (Alt+key), so none of their bytes come back
    as ordinary keys.
    """
    if len(text) < 2:
        return 1
    if text[1] == "[":
        for i in range(2, len(text)):
            if "\x40" <= text[i] <= "\x7e":
                return i + 1
        return len(text)
    if text[1] == "O":
        return min(3, len(text))
    return 2


class KeyboardHandler:
    """Cbreak-mode keyboard reader with a bounded wait.

    Bytes are read straight from the file descriptor so that a burst of
    input (an arrow key, or several keys typed quickly) is split into
    separate key presses instead of being lost in a stream buffer.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = None
        self.old_settings = None
        self._pending = ""

    def __enter__(self) -> "KeyboardHandler":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def start(self) -> None:
        """Put the terminal into cbreak mode, remembering the old settings."""
        try:
            self.fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (OSError, ValueError, termios.error) as e:
            raise TerminalError(f"Cannot read keys from this terminal: {e}") from e

    def get_key(self, timeout: float = 0.0) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a key press.

        Returns a printable character, one of "space", "enter", "up",
        "down", "escape", or None if nothing was pressed in time.
        """
        if not self._pending:
            if not select.select([self.fd], [], [], max(0.0, timeout))[0]:
                return None
            data = os.read(self.fd, READ_SIZE)
            self._pending += data.decode("utf-8", errors="ignore")
            if not self._pending:
                return None

        return self._next_key()

    def _next_key(self) -> str:
        if self._pending.startswith(ESCAPE):
            length = _escape_length(self._pending)
            sequence, self._pending = self._pending[:length], self._pending[length:]
            return _ARROWS.get(sequence[1:], "escape")

        key, self._pending = self._pending[0], self._pending[1:]
        return _NAMED.get(key, key)

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except termios.error as e:
            raise TerminalError(f"Cannot restore terminal settings: {e}") from e
        finally:
            self.old_settings = None
