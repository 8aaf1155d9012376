# src/daily_planner/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_errors import (
    CapacityExceeded,
    PersistenceFailure,
    TaskNotFound,
    TaskStoreError,
)
from ..tasks.task_models import is_valid_clock

Prompt = Callable[[str], str]
Emitter = Callable[[str], None]
MenuHandler = Callable[[AppState, Prompt, Emitter], str]

logger = logging.getLogger(__name__)

MENU_TITLE = "Time Management System"
EXIT_CHOICE = 7

INVALID_INPUT = "Invalid input! Please enter a number."
INVALID_CHOICE = "Invalid choice!"
INVALID_NUMBER = "Invalid task number."

_TIME_RE = re.compile(r"\s*(\d{1,2}):(\d{1,2})\s*")


def parse_choice(line: str) -> int | None:
    try:
        return int(line.strip())
    except ValueError:
        return None


def parse_time(text: str) -> tuple[int, int] | None:
    """Parse "HH:MM" (one or two digits each). None if malformed or out of range."""
    m = _TIME_RE.fullmatch(text)
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if not is_valid_clock(hour, minute):
        return None
    return hour, minute


class MenuRegistry:
    """Numbered menu registry used by the console connector (1. Add Task, ...)."""

    def __init__(self, title: str = MENU_TITLE, exit_choice: int = EXIT_CHOICE) -> None:
        self.title = title
        self.exit_choice = exit_choice
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, handler: MenuHandler, label: str) -> None:
        if choice == self.exit_choice:
            raise ValueError(f"choice {choice} is reserved for Exit")
        self._handlers[choice] = handler
        self._labels[choice] = label

    def is_exit(self, line: str) -> bool:
        return parse_choice(line) == self.exit_choice

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Prompt,
        emit: Emitter = print,
    ) -> str:
        """
        Handle one menu choice.
        Returns the text to show the user; never raises for bad input.
        """
        choice = parse_choice(line)
        if choice is None:
            return INVALID_INPUT

        handler = self._handlers.get(choice)
        if not handler:
            return INVALID_CHOICE

        return handler(state, ask, emit)

    def build_menu(self) -> str:
        lines = [f"\n--- {self.title} ---"]
        for choice in sorted(self._labels):
            lines.append(f"{choice}. {self._labels[choice]}")
        lines.append(f"{self.exit_choice}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def describe_error(err: TaskStoreError) -> str:
    if isinstance(err, TaskNotFound):
        return "Task not found."
    if isinstance(err, CapacityExceeded):
        return "Too many tasks!"
    if isinstance(err, PersistenceFailure):
        return f"{err}. Changes were not saved."
    return str(err)


def _ask_time(ask: Prompt, emit: Emitter, prompt: str, retry_msg: str) -> tuple[int, int]:
    # Keeps asking until the user gives a valid HH:MM.
    while True:
        parsed = parse_time(ask(prompt))
        if parsed is not None:
            return parsed
        emit(retry_msg)


def _ask_number(ask: Prompt, prompt: str) -> int | None:
    return parse_choice(ask(prompt))


def render_tasks(state: AppState, *, completed: bool) -> str:
    header = "Completed" if completed else "Today's"
    lines = [f"\n--- {header} Tasks ---"]
    shown = 0
    for task in state.task_store.iter_tasks(completed=completed):
        carried = " (Carried)" if task.carried else ""
        lines.append(f"Task {task.number}")
        lines.append(f"Desc: {task.description}")
        lines.append(f"Time: {task.time_label}{carried}")
        lines.append("")
        shown += 1
    if not shown:
        lines.append("(none)")
    return "\n".join(lines)


def cmd_add(state: AppState, ask: Prompt, emit: Emitter) -> str:
    store = state.task_store
    if store.is_full():
        return "Too many tasks!"

    description = ask("Enter task description: ")
    hour, minute = _ask_time(
        ask,
        emit,
        "Enter time (HH:MM): ",
        "Invalid time format! Please enter in HH:MM format (e.g., 14:30).",
    )
    try:
        task = store.add_task(description, hour, minute)
    except TaskStoreError as e:
        return describe_error(e)

    logger.info("Added task %s at %s", task.number, task.time_label)
    return "Task added."


def cmd_edit(state: AppState, ask: Prompt, emit: Emitter) -> str:
    store = state.task_store
    number = _ask_number(ask, "Enter task number to edit: ")
    if number is None:
        return INVALID_NUMBER
    if store.get_task(number) is None:
        return "Task not found."

    description = ask("New description: ")
    hour, minute = _ask_time(
        ask,
        emit,
        "Enter new time (HH:MM): ",
        "Invalid time! Please use format HH:MM (e.g., 09:15).",
    )
    try:
        store.edit_task(number, description, hour, minute)
    except TaskStoreError as e:
        return describe_error(e)
    return "Task updated."


def cmd_delete(state: AppState, ask: Prompt, emit: Emitter) -> str:
    number = _ask_number(ask, "Enter task number to delete: ")
    if number is None:
        return INVALID_NUMBER
    try:
        state.task_store.delete_task(number)
    except TaskStoreError as e:
        return describe_error(e)
    return "Task deleted."


def cmd_mark_done(state: AppState, ask: Prompt, emit: Emitter) -> str:
    number = _ask_number(ask, "Enter task number to mark as done: ")
    if number is None:
        return INVALID_NUMBER
    try:
        state.task_store.mark_done(number)
    except TaskStoreError as e:
        return describe_error(e)
    return "Task marked as done."


def cmd_view_pending(state: AppState, ask: Prompt, emit: Emitter) -> str:
    return render_tasks(state, completed=False)


def cmd_view_completed(state: AppState, ask: Prompt, emit: Emitter) -> str:
    return render_tasks(state, completed=True)


registry.register(1, cmd_add, "Add Task")
registry.register(2, cmd_edit, "Edit Task")
registry.register(3, cmd_delete, "Delete Task")
registry.register(4, cmd_view_pending, "View Today's Tasks")
registry.register(5, cmd_mark_done, "Mark Task Done")
registry.register(6, cmd_view_completed, "View Completed Tasks")
