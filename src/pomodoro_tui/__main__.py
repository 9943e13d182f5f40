"""Allow ``python -m pomodoro_tui``."""

from pomodoro_tui.main import main

main()
