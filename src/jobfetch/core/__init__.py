"""Core business logic modules."""

from jobfetch.core.dedup import dedupe
from jobfetch.core.freshness import is_posted_today
from jobfetch.core.notifier import Notifier
from jobfetch.core.quota import fetch_remaining_searches
from jobfetch.core.reporter import build_report_body
from jobfetch.core.serpapi import SerpApiClient

__all__ = [
    "Notifier",
    "SerpApiClient",
    "build_report_body",
    "dedupe",
    "fetch_remaining_searches",
    "is_posted_today",
]
