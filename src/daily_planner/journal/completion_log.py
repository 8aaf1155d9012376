# src/daily_planner/journal/completion_log.py

from __future__ import annotations

import logging
from pathlib import Path

from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class CompletionLog:
    """
    Append-only text log of finished tasks.

    One line per mark-done: "Completed: <description> at HH:MM".
    The file is never truncated and never read back by the app.
    """

    def __init__(self, path: str | Path = "log.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def format_entry(task: Task) -> str:
        return f"Completed: {task.description} at {task.time_label}\n"

    def record(self, task: Task) -> bool:
        """Append one line. Returns False (and logs) if the file is not writable."""
        line = self.format_entry(task)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as e:
            logger.warning("Failed to append to completion log %s: %s", self._path, e)
            return False
        return True
