# src/daily_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and the console depend on Protocols instead of concrete classes.
This keeps the completion log swappable and makes testing easier.
"""

from collections.abc import Iterator
from datetime import datetime, time
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from ..tasks.task_reminders import Reminder


class CompletionSink(Protocol):
    """
    Best-effort side channel notified when a task is marked done.

    Implementations must not raise; returning False signals the entry was lost.
    """

    def record(self, task: Task) -> bool: ...


class TaskRepo(Protocol):
    # Read API
    def count_tasks(self) -> int: ...
    def is_full(self) -> bool: ...
    def get_task(self, number: int) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def iter_tasks(self, *, completed: bool) -> Iterator[Task]: ...
    def check_reminders(self, now: time | datetime) -> list[Reminder]: ...

    # Mutations (each one is persisted before returning)
    def add_task(self, description: str, hour: int, minute: int) -> Task: ...
    def edit_task(self, number: int, description: str, hour: int, minute: int) -> Task: ...
    def delete_task(self, number: int) -> Task: ...
    def mark_done(self, number: int) -> Task: ...
    def carry_over(self) -> int: ...
