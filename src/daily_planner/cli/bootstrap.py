# src/daily_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the completion log, task store and quotes into AppState,
- runs the once-per-session startup policy (carry-over).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..journal.completion_log import CompletionLog
from ..journal.quotes import load_quotes
from ..tasks.task_errors import PersistenceFailure
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.completion_log_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    completion_log = CompletionLog(settings.completion_log_path)
    task_store = TaskStore(
        settings.tasks_path,
        max_tasks=settings.max_tasks,
        completion_log=completion_log,
        reminder_lead_minutes=settings.reminder_lead_minutes,
        atomic=settings.atomic_save,
    )

    return AppState(
        settings=settings,
        task_store=task_store,
        completion_log=completion_log,
        quotes=load_quotes(settings.quotes_path, limit=settings.max_quotes),
    )


def start_session(state: AppState) -> int:
    """
    Flag tasks left unfinished by a previous session as carried.

    Returns the number of tasks that changed. A failed save is logged and the
    session continues with the previous flags.
    """
    try:
        return state.task_store.carry_over()
    except PersistenceFailure:
        logger.exception("Carry-over could not be saved.")
        return 0
