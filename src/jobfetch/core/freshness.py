"""Decide whether a provider "posted at" string means published today.

SerpAPI returns free text ("3 hours ago", "Today", ISO dates, ...) with no
canonical format, so the check is a layered heuristic. The pattern lists
live in ``config.defaults`` so they can change without touching callers.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

from dateutil import parser as date_parser

from jobfetch.config.defaults import FRESH_PHRASES, FRESH_WORD_PATTERNS

logger = logging.getLogger(__name__)

_FRESH_WORDS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern) for pattern in FRESH_WORD_PATTERNS
)
_PUNCTUATION = re.compile(r"[.,]")

# Two different fill-in defaults: a component the string does not name takes
# the default's value, so only dates spelled out in full agree under both.
_SENTINEL_A = datetime(1904, 1, 1)
_SENTINEL_B = datetime(1905, 2, 2)


def is_posted_today(raw: str | None, *, today: date | None = None) -> bool:
    """Return True if *raw* describes a posting published today.

    Rules, first match wins:

    1. ``None`` / blank → False
    2. "just posted" / "just now" → True
    3. whole word minute(s), min(s), hour(s), hr(s) or today → True
    4. an explicit calendar date equal to *today* (local time) → True
    5. anything else → False
    """
    if not raw or not isinstance(raw, str):
        return False

    normalized = raw.strip().lower()
    if not normalized:
        return False

    if any(phrase in normalized for phrase in FRESH_PHRASES):
        return True

    sanitized = _PUNCTUATION.sub(" ", normalized)
    if any(pattern.search(sanitized) for pattern in _FRESH_WORDS):
        return True

    parsed = _parse_calendar_date(raw.strip())
    if parsed is None:
        return False

    return parsed == (today or date.today())


def _parse_calendar_date(text: str) -> date | None:
    """Parse *text* into a local calendar date, or None if it names none."""
    try:
        first = date_parser.parse(text, default=_SENTINEL_A)
        second = date_parser.parse(text, default=_SENTINEL_B)
    except (ValueError, OverflowError):
        return None

    if first.date() != second.date():
        logger.debug("Ignoring partial date %r", text)
        return None

    if first.tzinfo is not None:
        first = first.astimezone()
    return first.date()
