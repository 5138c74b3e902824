"""Pure text helpers shared by the classifier, dedup and report code."""

from __future__ import annotations

import re

_MULTI_SPACE = re.compile(r"[ \t]+")


def normalize_text(value: str | None) -> str:
    """Lowercase and trim *value*; ``None`` becomes an empty string."""
    if not value or not isinstance(value, str):
        return ""
    return value.strip().lower()


def clean_whitespace(text: str | None) -> str:
    """Collapse multiple spaces/tabs to single space and strip."""
    if not text or not isinstance(text, str):
        return ""
    return _MULTI_SPACE.sub(" ", text).strip()


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return *singular* for a count of one, otherwise the plural form."""
    if count == 1:
        return singular
    return plural if plural is not None else f"{singular}s"
