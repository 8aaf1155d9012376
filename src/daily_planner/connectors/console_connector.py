# src/daily_planner/connectors/console_connector.py

from __future__ import annotations

import logging
import random

from ..cli.commands import Emitter, MenuRegistry, Prompt
from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..journal.quotes import pick_quote

logger = logging.getLogger(__name__)


def show_quote(state: AppState, emit: Emitter = print, rng: random.Random | None = None) -> str | None:
    quote = pick_quote(state.quotes, rng)
    if quote is None:
        return None
    emit(f"\n*** MOTIVATION ***\n{quote}\n")
    return quote


def announce_reminders(state: AppState, emit: Emitter = print) -> int:
    """Print reminders due at the current minute. Returns how many were shown."""
    try:
        reminders = state.task_store.check_reminders(state.clock())
    except Exception:
        logger.exception("Reminder check failed.")
        return 0

    for reminder in reminders:
        logger.info("Reminder for task %s", reminder.task.number)
        emit(f"\n{reminder.text}")
    return len(reminders)


def run_console_loop(
    state: AppState,
    *,
    ask: Prompt = input,
    emit: Emitter = print,
    menu: MenuRegistry | None = None,
) -> None:
    menu = menu or menu_registry
    logger.info("Console started (tasks=%s).", state.task_store.count_tasks())

    while True:
        announce_reminders(state, emit)
        emit(menu.build_menu())

        try:
            line = ask("Enter choice: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if menu.is_exit(line):
            logger.info("Console exit command received.")
            emit("Goodbye!")
            break

        try:
            reply = menu.handle(state, line, ask, emit)
        except EOFError:
            logger.info("Console EOF received mid-command, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt mid-command, exiting.")
            emit("")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling a command."

        emit(reply)

    logger.info("Console connector finished.")
