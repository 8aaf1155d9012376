# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_planner.cli.bootstrap import create_initial_state
from daily_planner.core.state import AppState
from daily_planner.tasks.task_store import TaskStore

from .fakes import FakeCompletionLog


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and the store.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="daily-planner-test",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        completion_log_path=data_dir / "log.txt",
        quotes_path=tmp_path / "quotes.txt",
        max_tasks=100,
        max_quotes=100,
        reminder_lead_minutes=15,
        atomic_save=True,
    )


@pytest.fixture()
def completion_log() -> FakeCompletionLog:
    return FakeCompletionLog()


@pytest.fixture()
def store(tmp_path: Path, completion_log: FakeCompletionLog) -> TaskStore:
    return TaskStore(tmp_path / "tasks.txt", completion_log=completion_log)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired exactly like the real app, with a frozen clock.

    NOTE: We keep the real TaskStore and CompletionLog here because
    their file behaviour is part of what we want to test.
    """
    st = create_initial_state(settings=settings)
    st.clock = lambda: datetime(2026, 10, 19, 14, 15)
    return st
