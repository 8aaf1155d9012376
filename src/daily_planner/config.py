# src/daily_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Every path lives under one local data dir unless overridden.
- Tests inject their own settings object instead of reading the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PLANNER"

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r; using %s", name, raw, default)
        return default
    if minimum is not None and value < minimum:
        logger.warning("Ignoring %s=%s (must be >= %s); using %s", name, value, minimum, default)
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    completion_log_path: Path
    quotes_path: Path

    # ---- Task list policy ----
    max_tasks: int
    max_quotes: int
    reminder_lead_minutes: int
    atomic_save: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "daily-planner") or "daily-planner"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planner"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")
        completion_log_path = _env_path(_k("COMPLETION_LOG_PATH"), data_dir / "log.txt")
        quotes_path = _env_path(_k("QUOTES_PATH"), Path("quotes.txt"))

        max_tasks = _env_int(_k("MAX_TASKS"), 100, minimum=1)
        max_quotes = _env_int(_k("MAX_QUOTES"), 100, minimum=0)
        reminder_lead_minutes = _env_int(_k("REMINDER_LEAD_MINUTES"), 15, minimum=0)
        atomic_save = _env_bool(_k("ATOMIC_SAVE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            completion_log_path=completion_log_path,
            quotes_path=quotes_path,
            max_tasks=max_tasks,
            max_quotes=max_quotes,
            reminder_lead_minutes=reminder_lead_minutes,
            atomic_save=atomic_save,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding the real environment) once and cache the result."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
