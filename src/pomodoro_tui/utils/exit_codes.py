"""
Exit codes for Pomodoro TUI.

Semantic exit codes so wrapper scripts can tell a failed save from a
terminal that could not be driven. Bad command-line options exit with
click's usage-error code (2).
"""

# Success
SUCCESS = 0

# Task file could not be written
ERROR_IO = 3

# Terminal could not be set up or restored
ERROR_TERMINAL = 4
