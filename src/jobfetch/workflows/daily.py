"""Daily workflow: quota-aware loop over the configured role queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from jobfetch.config.defaults import QUOTA_EXHAUSTED_AT_START, QUOTA_USED_BY_EARLIER_ROLES
from jobfetch.core.dedup import dedupe
from jobfetch.core.freshness import is_posted_today
from jobfetch.core.models import QuotaPhase, ReportSection
from jobfetch.core.notifier import Notifier
from jobfetch.core.quota import fetch_remaining_searches
from jobfetch.core.reporter import build_report_body
from jobfetch.core.serpapi import SerpApiClient
from jobfetch.errors import QuotaExceeded
from jobfetch.utils.text_utils import pluralize

if TYPE_CHECKING:
    from jobfetch.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    """Sections collected by one run and whether they warrant an email."""

    sections: list[ReportSection] = field(default_factory=list)
    should_send: bool = False


class DailyFetchWorkflow:
    """Search each role once, under the SerpAPI quota, and email the result.

    Roles are processed strictly one at a time: the remaining-search count
    is checked before and decremented after every call.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        client: SerpApiClient | None = None,
        notifier: Notifier | None = None,
        today: date | None = None,
    ) -> None:
        self.settings = settings
        self.client = client or SerpApiClient(
            settings.serpapi_key, timeout=settings.request_timeout_seconds
        )
        self.notifier = notifier or Notifier(settings)
        self._today = today

        self.initial_searches = 0
        self.remaining_searches = 0
        self.phase = QuotaPhase.NORMAL
        self.has_any_posting = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Execute the full run. Returns 0 on success, 1 on fatal error."""
        try:
            outcome = self.collect_sections()
            if not outcome.should_send:
                logger.info("No postings today")
                return 0

            self.notifier.send_report(build_report_body(outcome.sections))
        except Exception:
            logger.exception("Fatal error in daily job fetch.")
            return 1

        logger.info("Email sent")
        return 0

    def collect_sections(self) -> RunOutcome:
        """Produce one section per role, in order.

        Raises on any failure other than quota exhaustion, after a failure
        notice has gone out; no sections are returned in that case.
        """
        self.initial_searches = fetch_remaining_searches(self.client, self.notifier)
        self.remaining_searches = self.initial_searches
        self.phase = QuotaPhase.NORMAL
        self.has_any_posting = False

        sections: list[ReportSection] = []
        for role in self.settings.role_query:
            if self.remaining_searches <= 0:
                sections.append(self._skip_role(role))
                continue
            sections.append(self._search_role(role))

        should_send = self.phase is QuotaPhase.LATCHED or self.has_any_posting
        return RunOutcome(sections=sections, should_send=should_send)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _skip_role(self, role: str) -> ReportSection:
        if self.phase is QuotaPhase.LATCHED:
            logger.info("Skipping '%s': quota reached earlier in this run", role)
            return ReportSection.quota_skipped(role)

        self._latch()
        logger.warning("Quota exhausted before '%s'; skipping remaining roles", role)
        return ReportSection.quota_triggered(role, self._exhausted_message())

    def _search_role(self, role: str) -> ReportSection:
        try:
            postings = self.client.search_jobs(role)
        except QuotaExceeded as exc:
            logger.warning("Quota exceeded while searching '%s': %s", role, exc)
            self._latch()
            self.remaining_searches = 0
            return ReportSection.quota_triggered(role, str(exc))
        except Exception as exc:
            logger.error("Search for '%s' failed: %s", role, exc)
            self.notifier.send_failure(str(exc))
            raise

        fresh = dedupe(p for p in postings if is_posted_today(p.posted_at, today=self._today))
        logger.info("'%s': %d of %d postings are from today", role, len(fresh), len(postings))
        if fresh:
            self.has_any_posting = True

        self.remaining_searches -= 1
        return ReportSection.from_postings(role, fresh)

    def _latch(self) -> None:
        self.phase = QuotaPhase.LATCHED

    def _exhausted_message(self) -> str:
        if self.initial_searches <= 0:
            return QUOTA_EXHAUSTED_AT_START
        return QUOTA_USED_BY_EARLIER_ROLES.format(
            count=self.initial_searches,
            searches=pluralize(self.initial_searches, "search", "searches"),
        )
