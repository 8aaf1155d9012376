# src/daily_planner/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .ports import CompletionSink, TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    task_store: TaskRepo
    completion_log: CompletionSink

    quotes: list[str] = field(default_factory=list)

    # Injectable so reminder checks can be tested without waiting for the clock.
    clock: Callable[[], datetime] = datetime.now
