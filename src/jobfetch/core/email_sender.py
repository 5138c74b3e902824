"""Email delivery through the Resend HTTP API."""

from __future__ import annotations

import logging

import requests

from jobfetch.config.defaults import RESEND_EMAILS_URL

logger = logging.getLogger(__name__)


def send_email(
    *,
    api_key: str,
    from_email: str,
    to_email: str,
    subject: str,
    body: str,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> tuple[bool, str]:
    """
    Send a plain-text email via Resend (single attempt).

    Returns (success, error_message). error_message is empty on success.
    """
    payload = {
        "from": from_email,
        "to": [to_email],
        "subject": subject,
        "text": body,
    }
    headers = {"Authorization": f"Bearer {api_key}"}
    http = session or requests.Session()

    try:
        response = http.post(
            RESEND_EMAILS_URL, json=payload, headers=headers, timeout=timeout
        )
    except requests.RequestException as exc:
        error = f"Resend request failed: {exc}"
        logger.warning(error)
        return False, error

    if not response.ok:
        error = f"Resend responded with status {response.status_code}: {response.text}"
        logger.warning(error)
        return False, error

    logger.info("Email '%s' sent to %s", subject, to_email)
    return True, ""
