"""Remaining-search lookup against the SerpAPI account endpoint."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from jobfetch.config.defaults import REMAINING_SEARCH_FIELDS
from jobfetch.errors import QuotaLookupError

if TYPE_CHECKING:
    from jobfetch.core.notifier import Notifier
    from jobfetch.core.serpapi import SerpApiClient

logger = logging.getLogger(__name__)

UNREADABLE_COUNT = "Unable to determine remaining SerpAPI searches from account response."


def extract_remaining_searches(payload: dict[str, Any]) -> int:
    """Read the remaining-credit count from an account payload.

    The first field of ``REMAINING_SEARCH_FIELDS`` that is present decides;
    later fields are not consulted even if that value is unusable.
    """
    value = next(
        (payload[name] for name in REMAINING_SEARCH_FIELDS if payload.get(name) is not None),
        None,
    )
    if value is None or isinstance(value, bool):
        raise QuotaLookupError(UNREADABLE_COUNT)

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise QuotaLookupError(UNREADABLE_COUNT) from None

    if not math.isfinite(number):
        raise QuotaLookupError(UNREADABLE_COUNT)
    return int(number)


def fetch_remaining_searches(client: SerpApiClient, notifier: Notifier) -> int:
    """Return remaining SerpAPI searches for this account.

    On failure the operator gets a failure notice before the
    ``QuotaLookupError`` propagates. An unknown count is never treated as
    zero.
    """
    try:
        remaining = extract_remaining_searches(client.get_account())
    except QuotaLookupError as exc:
        logger.error("Quota lookup failed: %s", exc)
        notifier.send_failure(str(exc))
        raise

    logger.info("SerpAPI searches remaining: %d", remaining)
    return remaining
