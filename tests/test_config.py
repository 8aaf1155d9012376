# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from daily_planner.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "DATA_DIR",
    "TASKS_PATH",
    "COMPLETION_LOG_PATH",
    "QUOTES_PATH",
    "MAX_TASKS",
    "MAX_QUOTES",
    "REMINDER_LEAD_MINUTES",
    "ATOMIC_SAVE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"PLANNER_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "daily-planner"
    assert s.data_dir == Path(".local/planner")
    assert s.tasks_path == Path(".local/planner/tasks.txt")
    assert s.completion_log_path == Path(".local/planner/log.txt")
    assert s.quotes_path == Path("quotes.txt")
    assert s.max_tasks == 100
    assert s.reminder_lead_minutes == 15
    assert s.atomic_save is True


def test_paths_follow_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PLANNER_COMPLETION_LOG_PATH", str(tmp_path / "done.log"))

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.completion_log_path == tmp_path / "done.log"


def test_bad_integers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLANNER_MAX_TASKS", "lots")
    monkeypatch.setenv("PLANNER_REMINDER_LEAD_MINUTES", "-5")
    monkeypatch.setenv("PLANNER_ATOMIC_SAVE", "no")

    s = Settings.from_env()
    assert s.max_tasks == 100
    assert s.reminder_lead_minutes == 15
    assert s.atomic_save is False


def test_max_tasks_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLANNER_MAX_TASKS", "5")
    assert Settings.from_env().max_tasks == 5
