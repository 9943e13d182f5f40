"""Task file persistence."""

from .task_file import load_tasks, parse_tasks, save_tasks, serialize_tasks

__all__ = ["load_tasks", "parse_tasks", "save_tasks", "serialize_tasks"]
