"""Configuration management for Pomodoro TUI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

if TYPE_CHECKING:
    from pomodoro_tui.models.timer import PomodoroMode

DEFAULT_TASK_FILE = "tasks"


class Settings(BaseModel):
    """Session settings: timer lengths, task file and initial display mode."""

    pomodoro_minutes: int = Field(default=25, ge=1)
    short_break_minutes: int = Field(default=5, ge=1)
    long_break_minutes: int = Field(default=15, ge=1)
    task_file_path: str = Field(default=DEFAULT_TASK_FILE)
    focus_mode: bool = Field(default=False)

    def duration_for(self, mode: PomodoroMode) -> int:
        """Configured length of *mode* in seconds."""
        minutes = {
            "pomodoro": self.pomodoro_minutes,
            "short_break": self.short_break_minutes,
            "long_break": self.long_break_minutes,
        }[mode.value]
        return minutes * 60


class ConfigManager:
    """Loads default settings from the user config directory."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomodoro-tui"))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Settings] = None

    @property
    def config(self) -> Settings:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Settings:
        """Load configuration from file, falling back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return Settings(**data)
            except (OSError, ValueError, TypeError, ValidationError):
                # If config is corrupted, return default
                return Settings()
        return Settings()

    def resolve(self, **overrides: Any) -> Settings:
        """Merge command-line values over the file settings.

        ``None`` values mean "not given" and keep the file value.
        """
        data = self.config.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**data)


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
