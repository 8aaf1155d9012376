# src/daily_planner/tasks/task_errors.py

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for every error the task store raises to its caller."""


class TaskNotFound(TaskStoreError, LookupError):
    def __init__(self, number: int) -> None:
        super().__init__(f"Task {number} not found")
        self.number = number


class InvalidTime(TaskStoreError, ValueError):
    def __init__(self, hour: int, minute: int) -> None:
        super().__init__(
            f"Invalid time {hour}:{minute}: hour must be 0-23 and minute 0-59"
        )
        self.hour = hour
        self.minute = minute


class InvalidDescription(TaskStoreError, ValueError):
    """Description would break the one-line-per-field file format."""


class CapacityExceeded(TaskStoreError):
    def __init__(self, max_tasks: int) -> None:
        super().__init__(f"Task list is full ({max_tasks} tasks)")
        self.max_tasks = max_tasks


class PersistenceFailure(TaskStoreError):
    def __init__(self, path: str | Path, reason: str = "") -> None:
        msg = f"Could not write tasks file {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = Path(path)
