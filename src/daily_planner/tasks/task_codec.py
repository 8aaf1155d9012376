# src/daily_planner/tasks/task_codec.py

"""
Plain-text block format of the tasks file.

One block per task, in list order, no blank lines between blocks:

    Task 1
    Description: Write report
    Time: 14:30
    Status: Pending
    Carried: No
    ---

The parser is deliberately forgiving: it walks the file block by block and
stops at the first block that does not look right, keeping everything
parsed before it. A truncated file therefore loses only its damaged tail.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .task_models import Task, TaskStatus, format_clock, is_valid_clock

logger = logging.getLogger(__name__)

SEPARATOR = "---"
BLOCK_FIELDS = 5

CARRIED_YES = "Yes"
CARRIED_NO = "No"

_NUMBER_RE = re.compile(r"Task\s+(\d+)\s*")
_TIME_RE = re.compile(r"Time:\s*(\d{1,2}):(\d{1,2})\s*")

_DESCRIPTION_PREFIX = "Description:"
_STATUS_PREFIX = "Status:"
_CARRIED_PREFIX = "Carried:"


def format_task(task: Task) -> str:
    return (
        f"Task {task.number}\n"
        f"Description: {task.description}\n"
        f"Time: {format_clock(task.hour, task.minute)}\n"
        f"Status: {task.status.value}\n"
        f"Carried: {CARRIED_YES if task.carried else CARRIED_NO}\n"
        f"{SEPARATOR}\n"
    )


def format_tasks(tasks: Iterable[Task]) -> str:
    return "".join(format_task(t) for t in tasks)


def _field_value(line: str, prefix: str) -> str | None:
    if not line.startswith(prefix):
        return None
    return line[len(prefix):].strip()


def _description_value(line: str) -> str | None:
    # Keep the text verbatim (only the single space we write is removed),
    # so save -> load reproduces leading/trailing spaces.
    if line.startswith(_DESCRIPTION_PREFIX + " "):
        return line[len(_DESCRIPTION_PREFIX) + 1:]
    if line == _DESCRIPTION_PREFIX:
        return ""
    return None


def parse_block(lines: list[str]) -> Task | None:
    """Parse the five field lines of one block. Returns None if any field is off."""
    if len(lines) < BLOCK_FIELDS:
        return None

    m_num = _NUMBER_RE.fullmatch(lines[0])
    if not m_num:
        return None

    description = _description_value(lines[1])
    if description is None:
        return None

    m_time = _TIME_RE.fullmatch(lines[2])
    if not m_time:
        return None
    hour, minute = int(m_time.group(1)), int(m_time.group(2))
    if not is_valid_clock(hour, minute):
        return None

    status = _field_value(lines[3], _STATUS_PREFIX)
    carried = _field_value(lines[4], _CARRIED_PREFIX)
    if status is None or carried is None:
        return None

    return Task(
        number=int(m_num.group(1)),
        description=description,
        hour=hour,
        minute=minute,
        completed=TaskStatus.from_text(status) is TaskStatus.DONE,
        carried=(carried == CARRIED_YES),
    )


def parse_tasks(text: str, *, limit: int | None = None) -> list[Task]:
    """
    Parse a whole tasks file.

    Never raises on malformed content:
    - stops at the first block that fails to parse
    - a last block whose separator is missing at EOF is still accepted
    - stops once `limit` tasks have been read
    """
    # Split on "\n" only, exactly what format_task writes; str.splitlines would
    # also break on form feeds and unicode separators inside descriptions.
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()

    tasks: list[Task] = []
    i = 0
    while i < len(lines):
        if limit is not None and len(tasks) >= limit:
            logger.warning("Tasks file has more than %d tasks; ignoring the rest.", limit)
            break

        task = parse_block(lines[i:i + BLOCK_FIELDS])
        if task is None:
            logger.warning(
                "Tasks file is malformed at line %d; keeping %d task(s) parsed so far.",
                i + 1,
                len(tasks),
            )
            break

        tasks.append(task)
        i += BLOCK_FIELDS

        if i < len(lines):
            if lines[i].strip() != SEPARATOR:
                logger.warning(
                    "Missing block separator at line %d; keeping %d task(s).",
                    i + 1,
                    len(tasks),
                )
                break
            i += 1

    return tasks
