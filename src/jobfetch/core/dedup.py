"""Collapse repeated postings by normalised title + company."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jobfetch.core.models import JobPosting
from jobfetch.utils.text_utils import normalize_text

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "|"


def posting_key(posting: JobPosting) -> str:
    """Return the identity key of *posting*.

    Only title and company take part; location, posted-at and apply link
    never do.
    """
    return (
        normalize_text(posting.title)
        + KEY_SEPARATOR
        + normalize_text(posting.company_name)
    )


def dedupe(postings: Iterable[JobPosting]) -> list[JobPosting]:
    """Drop repeats, keeping the first occurrence and the original order."""
    seen: set[str] = set()
    output: list[JobPosting] = []
    dropped = 0

    for posting in postings:
        key = posting_key(posting)
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        output.append(posting)

    if dropped:
        logger.debug("Removed %d duplicate postings", dropped)
    return output
