"""Default constants for jobfetch.

Provider endpoints are constants here, not ``Settings`` fields.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Remote endpoints
# ---------------------------------------------------------------------------
SERPAPI_BASE_URL: str = "https://serpapi.com"
SERPAPI_ENGINE: str = "google_jobs"
RESEND_EMAILS_URL: str = "https://api.resend.com/emails"

# ---------------------------------------------------------------------------
# Account response fields holding the remaining search credits.
# Checked in order; the first one present wins.
# ---------------------------------------------------------------------------
REMAINING_SEARCH_FIELDS: tuple[str, ...] = (
    "total_searches_left",
    "plan_searches_left",
    "searches_left",
)

# Provider error text containing any of these is treated as quota exhaustion
QUOTA_ERROR_KEYWORDS: tuple[str, ...] = ("quota", "limit", "exceeded")

# ---------------------------------------------------------------------------
# Freshness heuristics
# Substring phrases are checked first, then whole-word regex patterns
# against the text with "." and "," replaced by spaces.
# ---------------------------------------------------------------------------
FRESH_PHRASES: tuple[str, ...] = ("just posted", "just now")

FRESH_WORD_PATTERNS: tuple[str, ...] = (
    r"\bminute\b",
    r"\bminutes\b",
    r"\bmin\b",
    r"\bmins\b",
    r"\bhour\b",
    r"\bhours\b",
    r"\bhr\b",
    r"\bhrs\b",
    r"\btoday\b",
)

# ---------------------------------------------------------------------------
# Email subjects
# ---------------------------------------------------------------------------
REPORT_SUBJECT: str = "Latest job postings"
FAILURE_SUBJECT: str = "Daily job fetch failed"

# ---------------------------------------------------------------------------
# Report text
# ---------------------------------------------------------------------------
APPLY_LINK_UNAVAILABLE: str = "Apply link unavailable"
POSTED_AT_UNKNOWN: str = "Unknown"
NO_RESULTS_TEXT: str = "No new postings published today."
QUOTA_TRIGGERED_DEFAULT: str = (
    "SerpAPI free tier limit reached while running this search."
)
QUOTA_TRIGGERED_FOOTER: str = "Remaining roles were skipped to avoid extra API calls."
QUOTA_SKIPPED_TEXT: str = (
    "Skipped because the SerpAPI free tier limit was reached earlier today."
)
QUOTA_EXHAUSTED_AT_START: str = "SerpAPI search credits are exhausted for today."
QUOTA_USED_BY_EARLIER_ROLES: str = (
    "SerpAPI only had {count} {searches} available and they were used by "
    "earlier roles in this run."
)
