# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from daily_planner.tasks.task_models import Task


class FakeCompletionLog:
    """
    In-memory CompletionSink.

    - Captures every recorded task for assertions
    - Can be told to report failure or to blow up
    """

    def __init__(self, *, ok: bool = True, explode: bool = False) -> None:
        self.ok = ok
        self.explode = explode
        self.entries: list[Task] = []

    def record(self, task: Task) -> bool:
        if self.explode:
            raise RuntimeError("log is on fire")
        self.entries.append(task)
        return self.ok


class ScriptedInput:
    """
    Stand-in for input(): returns queued answers, then raises EOFError.

    Prompts are captured so tests can check what the user was asked.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)
