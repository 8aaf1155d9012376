# src/daily_planner/tasks/task_reminders.py

from __future__ import annotations

"""
Reminder policy.

A pending task is announced once its alert minute (due time minus the lead,
15 minutes by default) equals the current minute exactly. There is no window:
the console loop polls on every menu iteration, and a poll that misses the
minute misses the reminder.

The alert minute borrows an hour when needed but never wraps below midnight,
so tasks due before 00:15 are never announced.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time

from .task_models import Task

DEFAULT_LEAD_MINUTES = 15


@dataclass(slots=True, frozen=True)
class Reminder:
    """What the console should announce for one task."""

    task: Task
    alert_hour: int
    alert_minute: int
    lead_minutes: int = DEFAULT_LEAD_MINUTES

    @property
    def text(self) -> str:
        return (
            f"Reminder: Task '{self.task.description}' is due in "
            f"{self.lead_minutes} minutes!"
        )


def alert_time(task: Task, lead_minutes: int = DEFAULT_LEAD_MINUTES) -> tuple[int, int] | None:
    hour = task.hour
    minute = task.minute - lead_minutes
    while minute < 0:
        minute += 60
        hour -= 1
    if hour < 0:
        return None
    return hour, minute


def check_reminders(
    tasks: Iterable[Task],
    now: time | datetime,
    *,
    lead_minutes: int = DEFAULT_LEAD_MINUTES,
) -> list[Reminder]:
    """Return reminders for incomplete tasks whose alert minute is exactly `now`."""
    now_hm = (now.hour, now.minute)
    out: list[Reminder] = []
    for task in tasks:
        if task.completed:
            continue
        at = alert_time(task, lead_minutes)
        if at is None or at != now_hm:
            continue
        out.append(
            Reminder(
                task=task,
                alert_hour=at[0],
                alert_minute=at[1],
                lead_minutes=lead_minutes,
            )
        )
    return out
