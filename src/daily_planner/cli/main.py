# src/daily_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the session:
- show a random motivational quote,
- carry over tasks left unfinished last time,
- run the numbered menu in the main thread until Exit.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, start_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, show_quote
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError as e:
        logger.exception("Failed to open task storage.")
        print(f"Cannot start: {e}")
        return 1

    show_quote(state)
    start_session(state)

    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
