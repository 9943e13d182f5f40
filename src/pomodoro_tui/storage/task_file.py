"""Read and write the flat task file.

The file is a run of records separated by ``---`` lines::

    ---
    title: Write report
    pomodoros_expected: 4
    pomodoros_completed: 1
    completed: false
    ---
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pomodoro_tui.exceptions import TaskFileError
from pomodoro_tui.models.task import Task
from pomodoro_tui.utils.logger import get_logger

DELIMITER = "---"
# A record separator is a line holding only the delimiter.
_SEPARATOR_RE = re.compile(r"^[ \t]*---[ \t]*$", re.MULTILINE)
FIELDS = ("title", "pomodoros_expected", "pomodoros_completed", "completed")


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        return 0
    return count if count >= 0 else 0


def _parse_flag(value: str) -> bool:
    return value.strip().lower() == "true"


def _parse_record(section: str) -> Task:
    # Fields are positional, in FIELDS order; the key text is not checked.
    values = []
    for line in section.splitlines():
        if ":" not in line:
            continue
        values.append(line.split(":", 1)[1].strip())
    values += [""] * (len(FIELDS) - len(values))

    return Task(
        title=values[0],
        pomodoros_expected=_parse_count(values[1]),
        pomodoros_completed=_parse_count(values[2]),
        completed=_parse_flag(values[3]),
    )


def parse_tasks(text: str) -> list[Task]:
    """Parse task file contents. Bad numbers and flags become 0 / False."""
    sections = (section.strip() for section in _SEPARATOR_RE.split(text))
    return [_parse_record(section) for section in sections if section]


def serialize_tasks(tasks: Iterable[Task]) -> str:
    """Render tasks in file format, always ending with a delimiter line."""
    parts = []
    for task in tasks:
        parts.append(
            f"{DELIMITER}\n"
            f"title: {task.title}\n"
            f"pomodoros_expected: {task.pomodoros_expected}\n"
            f"pomodoros_completed: {task.pomodoros_completed}\n"
            f"completed: {'true' if task.completed else 'false'}\n"
        )
    parts.append(DELIMITER)
    return "".join(parts)


def load_tasks(path: str | Path) -> list[Task]:
    """Load tasks from *path*; a missing or unreadable file gives no tasks."""
    logger = get_logger()
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Task file %s not found, starting with no tasks", path)
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read task file %s: %s", path, e)
        return []

    tasks = parse_tasks(text)
    logger.info("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """Overwrite *path* with *tasks* in one replace.

    Raises:
        TaskFileError: if the file cannot be written.
    """
    path = Path(path)
    content = serialize_tasks(tasks)

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise TaskFileError(path, e.strerror or str(e)) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    get_logger().info("Saved tasks to %s", path)
