# src/daily_planner/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Completion status as written to the tasks file.

    Notes:
    - there is no way back from DONE; a finished task stays finished
    """

    PENDING = "Pending"
    DONE = "Done"

    @classmethod
    def from_text(cls, raw: str | None) -> TaskStatus:
        # Anything that is not literally "Done" counts as pending.
        if raw == cls.DONE.value:
            return cls.DONE
        return cls.PENDING


def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def is_valid_clock(hour: int, minute: int) -> bool:
    return 0 <= hour < 24 and 0 <= minute < 60


@dataclass(slots=True)
class Task:
    number: int
    description: str
    hour: int
    minute: int

    completed: bool = False
    carried: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.DONE if self.completed else TaskStatus.PENDING

    @property
    def time_label(self) -> str:
        return format_clock(self.hour, self.minute)
