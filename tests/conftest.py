"""Shared test fixtures and configuration.

Keeps tests away from the real log and config directories and provides
small builders for tasks and application state.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from pomodoro_tui.config import ConfigManager, Settings
from pomodoro_tui.models.app_state import AppState
from pomodoro_tui.models.task import Task


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to *tmp_path* and reset the singleton."""
    import pomodoro_tui.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomodoro_tui").handlers.clear()
    with patch("pomodoro_tui.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"
    for handler in logging.getLogger("pomodoro_tui").handlers:
        handler.close()
    logging.getLogger("pomodoro_tui").handlers.clear()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the global config manager at an empty temporary directory."""
    import pomodoro_tui.config as config_mod

    manager = ConfigManager(config_dir=tmp_path / "config")
    original = config_mod._config_manager
    config_mod._config_manager = manager
    yield manager
    config_mod._config_manager = original


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(title="Write report", pomodoros_expected=4, pomodoros_completed=1),
        Task(title="Review PR", pomodoros_expected=2, pomodoros_completed=2, completed=True),
        Task(title="Inbox zero", pomodoros_expected=1),
    ]


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(task_file_path=str(tmp_path / "tasks"))


@pytest.fixture()
def app_state(settings, sample_tasks) -> AppState:
    return AppState.from_settings(settings, sample_tasks)
