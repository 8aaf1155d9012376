# tests/test_console_connector.py

from __future__ import annotations

import random
from datetime import datetime

from daily_planner.cli.bootstrap import create_initial_state, start_session
from daily_planner.connectors.console_connector import (
    announce_reminders,
    run_console_loop,
    show_quote,
)

from .fakes import ScriptedInput


def test_loop_runs_commands_until_exit(state) -> None:
    out: list[str] = []
    ask = ScriptedInput(["1", "Write report", "14:30", "oops", "4", "7", "never read"])

    run_console_loop(state, ask=ask, emit=out.append)

    text = "\n".join(out)
    assert "Task added." in text
    assert "Invalid input! Please enter a number." in text
    assert "Desc: Write report" in text
    assert out[-1] == "Goodbye!"
    assert ask.remaining == 1


def test_loop_exits_on_eof(state) -> None:
    out: list[str] = []
    run_console_loop(state, ask=ScriptedInput([]), emit=out.append)
    assert "Goodbye!" not in out


def test_loop_exits_on_eof_mid_command(state) -> None:
    out: list[str] = []
    run_console_loop(state, ask=ScriptedInput(["1", "half a task"]), emit=out.append)
    assert state.task_store.count_tasks() == 0


def test_reminder_printed_before_menu(state) -> None:
    state.task_store.add_task("Write report", 14, 30)
    out: list[str] = []

    run_console_loop(state, ask=ScriptedInput(["7"]), emit=out.append)

    assert out[0] == "\nReminder: Task 'Write report' is due in 15 minutes!"


def test_announce_reminders_respects_clock(state) -> None:
    state.task_store.add_task("Write report", 14, 30)
    out: list[str] = []

    assert announce_reminders(state, out.append) == 1
    state.clock = lambda: datetime(2026, 10, 19, 14, 16)
    assert announce_reminders(state, out.append) == 0
    assert len(out) == 1


def test_handler_crash_is_contained(state) -> None:
    class Boom:
        def __call__(self, *a, **kw):
            raise RuntimeError("boom")

    out: list[str] = []
    state.task_store.iter_tasks = Boom()  # type: ignore[method-assign]

    run_console_loop(state, ask=ScriptedInput(["4", "7"]), emit=out.append)

    assert "Internal error while handling a command." in out
    assert out[-1] == "Goodbye!"


def test_show_quote(settings) -> None:
    settings.quotes_path.write_text("Keep going.\n", encoding="utf-8")
    state = create_initial_state(settings=settings)
    out: list[str] = []

    assert show_quote(state, out.append, random.Random(1)) == "Keep going."
    assert out == ["\n*** MOTIVATION ***\nKeep going.\n"]


def test_show_quote_without_quotes(state) -> None:
    out: list[str] = []
    assert show_quote(state, out.append) is None
    assert out == []


def test_start_session_carries_over_previous_tasks(settings) -> None:
    first = create_initial_state(settings=settings)
    first.task_store.add_task("unfinished", 9, 0)
    first.task_store.add_task("finished", 10, 0)
    first.task_store.mark_done(2)

    second = create_initial_state(settings=settings)
    assert start_session(second) == 1

    flags = [(t.description, t.carried) for t in second.task_store.list_tasks()]
    assert flags == [("unfinished", True), ("finished", False)]
