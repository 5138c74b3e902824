"""Print the remaining SerpAPI searches for the configured account.

Usage:
    uv run python scripts/check_quota.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure src/ is on sys.path when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from jobfetch.config.settings import get_settings  # noqa: E402
from jobfetch.core.quota import extract_remaining_searches  # noqa: E402
from jobfetch.core.serpapi import SerpApiClient  # noqa: E402
from jobfetch.errors import QuotaLookupError  # noqa: E402


def main() -> int:
    settings = get_settings()
    if not settings.serpapi_key:
        print("SERPAPI_KEY is not set")
        return 1

    client = SerpApiClient(
        settings.serpapi_key, timeout=settings.request_timeout_seconds
    )

    print("=" * 60)
    print("SERPAPI QUOTA CHECK")
    print("=" * 60)
    print(f"Roles configured: {', '.join(settings.role_query) or '(none)'}")

    try:
        remaining = extract_remaining_searches(client.get_account())
    except QuotaLookupError as exc:
        print(f"✗ Lookup failed: {exc}")
        return 1

    print(f"✓ Searches remaining: {remaining}")
    if remaining < len(settings.role_query):
        print(
            f"  Only {remaining} of {len(settings.role_query)} roles "
            "can be searched on the next run."
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
