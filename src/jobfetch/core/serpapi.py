"""SerpAPI client: account lookup and Google Jobs search over requests."""

from __future__ import annotations

import logging
from typing import Any

import requests

from jobfetch.config.defaults import (
    QUOTA_ERROR_KEYWORDS,
    SERPAPI_BASE_URL,
    SERPAPI_ENGINE,
)
from jobfetch.core.models import JobPosting
from jobfetch.errors import QuotaExceeded, QuotaLookupError, SearchError

logger = logging.getLogger(__name__)

HTTP_TOO_MANY_REQUESTS = 429
REDACTED = "***"


def is_quota_error_message(message: str | None) -> bool:
    """Return True if provider error text signals quota exhaustion."""
    if not message:
        return False
    normalized = message.lower()
    return any(keyword in normalized for keyword in QUOTA_ERROR_KEYWORDS)


class SerpApiClient:
    """Thin wrapper over the two SerpAPI endpoints the job uses.

    Every call is a single attempt; nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        *,
        session: requests.Session | None = None,
        base_url: str = SERPAPI_BASE_URL,
        timeout: float = 30,
    ) -> None:
        self._api_key = api_key
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_account(self) -> dict[str, Any]:
        """Return the account status payload.

        Raises ``QuotaLookupError`` on transport failure, a non-2xx status
        or a body that is not a JSON object.
        """
        url = f"{self._base_url}/account"
        try:
            response = self._session.get(
                url, params={"api_key": self._api_key}, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise QuotaLookupError(
                f"SerpAPI account lookup error: {self._redact(str(exc))}"
            ) from exc

        if not response.ok:
            raise QuotaLookupError(
                f"SerpAPI account endpoint responded with status "
                f"{response.status_code}: {response.reason}\n"
                f"{self._redact(response.text)}"
            )

        payload = self._decode(response)
        if payload is None:
            raise QuotaLookupError("SerpAPI account endpoint returned invalid JSON")
        return payload

    def search_jobs(self, query: str) -> list[JobPosting]:
        """Run one Google Jobs search and return its postings unfiltered.

        Raises ``QuotaExceeded`` on HTTP 429 or a quota-style provider error,
        ``SearchError`` for every other failure.
        """
        url = f"{self._base_url}/search.json"
        params = {"engine": SERPAPI_ENGINE, "q": query, "api_key": self._api_key}

        logger.info("Searching SerpAPI for '%s'", query)
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            raise SearchError(
                f'SerpAPI request error for "{query}": {self._redact(str(exc))}'
            ) from exc

        if response.status_code == HTTP_TOO_MANY_REQUESTS:
            raise QuotaExceeded(
                f'SerpAPI free tier limit reached while fetching "{query}".'
            )

        if not response.ok:
            raise SearchError(
                f'SerpAPI responded with status {response.status_code} for "{query}": '
                f"{response.reason}\n{self._redact(response.text)}"
            )

        payload = self._decode(response)
        if payload is None:
            raise SearchError(f'SerpAPI returned invalid JSON for "{query}"')

        error = payload.get("error")
        if error:
            details = f'SerpAPI error for "{query}": {error}'
            if payload.get("error_code"):
                details += f" ({payload['error_code']})"
            if is_quota_error_message(str(error)):
                raise QuotaExceeded(details)
            raise SearchError(details)

        results = payload.get("jobs_results")
        if not isinstance(results, list):
            logger.info("  → no jobs_results for '%s'", query)
            return []

        postings = [JobPosting.from_serp(item) for item in results if isinstance(item, dict)]
        logger.info("  → %d results for '%s'", len(postings), query)
        return postings

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _decode(self, response: requests.Response) -> dict[str, Any] | None:
        try:
            payload = response.json()
        except ValueError:
            logger.warning("Could not decode SerpAPI response as JSON")
            return None
        if not isinstance(payload, dict):
            return None
        return payload

    def _redact(self, text: str) -> str:
        """Keep the API key out of messages that end up in emails and logs."""
        if not self._api_key:
            return text
        return text.replace(self._api_key, REDACTED)
