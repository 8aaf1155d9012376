# src/daily_planner/journal/quotes.py

from __future__ import annotations

import logging
import random
from itertools import islice
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUOTES = 100


def load_quotes(path: str | Path, limit: int = DEFAULT_MAX_QUOTES) -> list[str]:
    """
    Read up to `limit` quotes, one per line (blank lines skipped).

    Best-effort: a missing or unreadable file simply means no quote today.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("Quotes file %s not found.", path)
        return []

    try:
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            lines = [ln.rstrip("\r\n") for ln in islice(fh, max(0, int(limit)))]
    except OSError:
        logger.exception("Failed to read quotes from %s", path)
        return []

    quotes = [ln for ln in lines if ln.strip()]
    logger.debug("Loaded %d quote(s) from %s", len(quotes), path)
    return quotes


def pick_quote(quotes: list[str], rng: random.Random | None = None) -> str | None:
    if not quotes:
        return None
    return (rng or random).choice(quotes)
