"""Shared pytest fixtures for jobfetch tests."""

from __future__ import annotations

from typing import Any, Generator
from unittest.mock import MagicMock

import pytest

from jobfetch.config.settings import Settings, get_settings


@pytest.fixture()
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set minimal required env vars and return them as a dict.

    Every test that needs a ``Settings`` instance should use this fixture
    (or ``settings``) to avoid leaking real ``.env`` values into tests.
    """
    values: dict[str, str] = {
        # SerpAPI
        "SERPAPI_KEY": "serp-test-key",
        # Resend
        "RESEND_API_KEY": "re_test_key",
        "SENDER_EMAIL_ADDRESS": "Job Digest <jobs@example.com>",
        "TO_EMAIL_ADDRESS": "me@example.com",
        # Search
        "ROLE_QUERY": "Staff Engineer remote Canada, Engineering Manager",
        # General
        "LOG_LEVEL": "DEBUG",
    }
    for key in ("DRY_RUN", "REQUEST_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    for key, val in values.items():
        monkeypatch.setenv(key, val)
    return values


@pytest.fixture()
def settings(env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Return a fresh ``Settings`` loaded from mocked env vars.

    Clears the ``get_settings`` LRU cache before and after the test so
    singleton state never leaks between tests.
    """
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


def make_response(
    status_code: int = 200,
    payload: Any = None,
    *,
    text: str = "",
    reason: str = "OK",
) -> MagicMock:
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = reason
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def serp_job(
    title: str,
    company: str,
    posted_at: str | None = "3 hours ago",
    *,
    location: str = "Remote",
    link: str | None = "https://example.com/apply",
) -> dict[str, Any]:
    """Build one ``jobs_results`` entry shaped like SerpAPI output."""
    item: dict[str, Any] = {
        "title": title,
        "company_name": company,
        "location": location,
    }
    if posted_at is not None:
        item["detected_extensions"] = {"posted_at": posted_at}
    if link is not None:
        item["apply_options"] = [{"title": "Company site", "link": link}]
    return item
