"""Operator-facing email: the daily report and failure notices."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jobfetch.config.defaults import FAILURE_SUBJECT, REPORT_SUBJECT
from jobfetch.core.email_sender import send_email
from jobfetch.errors import NotificationError

if TYPE_CHECKING:
    import requests

    from jobfetch.config.settings import Settings

logger = logging.getLogger(__name__)


class Notifier:
    """Sends exactly two kinds of message to ``TO_EMAIL_ADDRESS``."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self._session = session

    def send_report(self, body: str) -> None:
        """Deliver the final report. Raises ``NotificationError`` on failure."""
        if self.settings.dry_run:
            logger.info("[DRY RUN] Would send report:\n%s", body)
            return

        success, error = self._send(REPORT_SUBJECT, body)
        if not success:
            raise NotificationError(f"Failed to send report email: {error}")

    def send_failure(self, details: str) -> None:
        """Deliver a failure notice. Delivery problems are logged, never raised."""
        if self.settings.dry_run:
            logger.info("[DRY RUN] Would send failure notice:\n%s", details)
            return

        try:
            success, error = self._send(FAILURE_SUBJECT, details)
        except Exception:
            logger.exception("Failed to send failure notification")
            return

        if not success:
            logger.error("Failed to send failure notification: %s", error)

    def _send(self, subject: str, body: str) -> tuple[bool, str]:
        return send_email(
            api_key=self.settings.resend_api_key,
            from_email=self.settings.sender_email_address,
            to_email=self.settings.to_email_address,
            subject=subject,
            body=body,
            session=self._session,
            timeout=self.settings.request_timeout_seconds,
        )
