# tests/test_journal.py

from __future__ import annotations

import random
from pathlib import Path

from daily_planner.journal.completion_log import CompletionLog
from daily_planner.journal.quotes import load_quotes, pick_quote
from daily_planner.tasks.task_models import Task


def test_completion_log_appends_lines(tmp_path: Path) -> None:
    log = CompletionLog(tmp_path / "logs" / "log.txt")
    assert log.record(Task(1, "Write report", 14, 30)) is True
    assert log.record(Task(2, "Gym", 7, 5)) is True

    assert log.path.read_text("utf-8") == (
        "Completed: Write report at 14:30\n"
        "Completed: Gym at 07:05\n"
    )


def test_completion_log_failure_is_reported_not_raised(tmp_path: Path) -> None:
    target = tmp_path / "log.txt"
    target.mkdir()
    log = CompletionLog(target)
    assert log.record(Task(1, "A", 9, 0)) is False


def test_load_quotes_skips_blank_lines_and_caps(tmp_path: Path) -> None:
    path = tmp_path / "quotes.txt"
    path.write_text("one\n\ntwo\r\nthree\nfour\n", encoding="utf-8")

    assert load_quotes(path) == ["one", "two", "three", "four"]
    assert load_quotes(path, limit=3) == ["one", "two"]


def test_load_quotes_missing_file(tmp_path: Path) -> None:
    assert load_quotes(tmp_path / "missing.txt") == []


def test_pick_quote() -> None:
    assert pick_quote([]) is None
    quotes = ["a", "b", "c"]
    assert pick_quote(quotes, random.Random(7)) in quotes
