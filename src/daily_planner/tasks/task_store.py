# src/daily_planner/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterator
from dataclasses import replace
from datetime import datetime, time
from pathlib import Path

from ..core.ports import CompletionSink
from .task_codec import format_tasks, parse_tasks
from .task_errors import (
    CapacityExceeded,
    InvalidDescription,
    InvalidTime,
    PersistenceFailure,
    TaskNotFound,
)
from .task_models import Task, is_valid_clock
from .task_reminders import DEFAULT_LEAD_MINUTES, Reminder, check_reminders

logger = logging.getLogger(__name__)

DEFAULT_MAX_TASKS = 100


class TaskStore:
    """
    Plain-text task store.

    The whole list lives in memory and is mirrored to one text file:
    - loaded once in __init__ (missing file -> empty list)
    - rewritten in full after every mutation
    - numbers are always 1..N in list order (delete renumbers the tail)

    If a write fails the in-memory list is rolled back, so memory never
    runs ahead of the file.
    """

    def __init__(
        self,
        path: str | Path = "tasks.txt",
        *,
        max_tasks: int = DEFAULT_MAX_TASKS,
        completion_log: CompletionSink | None = None,
        reminder_lead_minutes: int = DEFAULT_LEAD_MINUTES,
        atomic: bool = True,
    ) -> None:
        if max_tasks < 1:
            raise ValueError("max_tasks must be positive")
        self._path = Path(path)
        self._max_tasks = int(max_tasks)
        self._completion_log = completion_log
        self._lead_minutes = int(reminder_lead_minutes)
        self._atomic = atomic
        self._tasks: list[Task] = []
        total = self.load()
        logger.info("TaskStore ready path=%s total=%s max=%s", self._path, total, self._max_tasks)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def max_tasks(self) -> int:
        return self._max_tasks

    # ---- persistence ----

    def load(self) -> int:
        """
        Replace the in-memory list with the file contents.

        A missing file is an empty list. Malformed content is not an error:
        parsing stops at the first bad block and keeps what came before.
        """
        if not self._path.exists():
            self._tasks = []
            logger.debug("Tasks file %s not found; starting empty.", self._path)
            return 0

        text = self._path.read_text(encoding="utf-8", errors="replace")
        tasks = parse_tasks(text, limit=self._max_tasks)

        for idx, task in enumerate(tasks, start=1):
            if task.number != idx:
                logger.debug("Renumbering task %s -> %s on load", task.number, idx)
                task.number = idx

        self._tasks = tasks
        return len(tasks)

    def save(self) -> None:
        """Overwrite the tasks file with the full list. Raises PersistenceFailure."""
        payload = format_tasks(self._tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic:
                tmp.write_text(payload, encoding="utf-8")
                os.replace(tmp, self._path)
            else:
                self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            if self._atomic:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise PersistenceFailure(self._path, str(e)) from e
        logger.debug("Saved %d task(s) to %s", len(self._tasks), self._path)

    @contextlib.contextmanager
    def _mutation(self) -> Iterator[None]:
        """Run a mutation, then save; restore the previous list if saving fails."""
        snapshot = [replace(t) for t in self._tasks]
        try:
            yield
            self.save()
        except PersistenceFailure:
            self._tasks = snapshot
            raise

    # ---- low-level helpers ----

    def _index_of(self, number: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.number == number:
                return i
        raise TaskNotFound(number)

    @staticmethod
    def _validate(description: str, hour: int, minute: int) -> None:
        if not is_valid_clock(hour, minute):
            raise InvalidTime(hour, minute)
        if "\n" in description or "\r" in description:
            raise InvalidDescription("description must be a single line")

    # ---- read API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def is_full(self) -> bool:
        return len(self._tasks) >= self._max_tasks

    def get_task(self, number: int) -> Task | None:
        for task in self._tasks:
            if task.number == number:
                return replace(task)
        return None

    def list_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def iter_tasks(self, *, completed: bool) -> Iterator[Task]:
        """Lazily yield copies of the tasks whose completion flag matches, in list order."""
        for task in self._tasks:
            if task.completed == completed:
                yield replace(task)

    def check_reminders(self, now: time | datetime) -> list[Reminder]:
        return check_reminders(self.list_tasks(), now, lead_minutes=self._lead_minutes)

    # ---- mutations ----

    def add_task(self, description: str, hour: int, minute: int) -> Task:
        if self.is_full():
            raise CapacityExceeded(self._max_tasks)
        self._validate(description, hour, minute)

        task = Task(
            number=len(self._tasks) + 1,
            description=description,
            hour=int(hour),
            minute=int(minute),
        )
        with self._mutation():
            self._tasks.append(task)

        logger.debug("Task added number=%s time=%s", task.number, task.time_label)
        return replace(task)

    def edit_task(self, number: int, description: str, hour: int, minute: int) -> Task:
        idx = self._index_of(number)
        self._validate(description, hour, minute)

        with self._mutation():
            task = self._tasks[idx]
            task.description = description
            task.hour = int(hour)
            task.minute = int(minute)

        logger.debug("Task edited number=%s time=%s", number, task.time_label)
        return replace(task)

    def delete_task(self, number: int) -> Task:
        idx = self._index_of(number)

        with self._mutation():
            removed = self._tasks.pop(idx)
            for pos in range(idx, len(self._tasks)):
                self._tasks[pos].number = pos + 1

        logger.debug("Task deleted number=%s remaining=%s", number, len(self._tasks))
        return replace(removed)

    def mark_done(self, number: int) -> Task:
        """
        Mark a task as done, persist, then append to the completion log.

        Calling it again on a finished task is allowed and logs again.
        The log is best-effort: its failure never fails this call.
        """
        idx = self._index_of(number)

        with self._mutation():
            self._tasks[idx].completed = True

        done = replace(self._tasks[idx])
        logger.debug("Task %s -> done", number)

        if self._completion_log is not None:
            try:
                if not self._completion_log.record(done):
                    logger.warning("Completion log entry lost for task %s", number)
            except Exception:
                logger.exception("Completion log failed for task %s", number)
        return done

    def carry_over(self) -> int:
        """Flag every incomplete task as carried. Idempotent; saves once."""
        changed = 0
        with self._mutation():
            for task in self._tasks:
                if not task.completed and not task.carried:
                    task.carried = True
                    changed += 1

        if changed:
            logger.info("Carried over %d unfinished task(s).", changed)
        return changed
