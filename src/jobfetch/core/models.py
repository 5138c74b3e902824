"""Run-scoped data types: postings, report sections and quota phase."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jobfetch.config.defaults import APPLY_LINK_UNAVAILABLE
from jobfetch.utils.text_utils import clean_whitespace


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class JobPosting:
    """A single Google Jobs listing as returned by SerpAPI."""

    title: str
    company_name: str
    location: str = ""
    posted_at: str = ""
    apply_url: str = APPLY_LINK_UNAVAILABLE

    @classmethod
    def from_serp(cls, item: dict[str, Any]) -> JobPosting:
        """Build a posting from one ``jobs_results`` entry.

        Missing or oddly-shaped nested fields degrade to empty strings and
        the apply-link placeholder instead of raising.
        """
        extensions = item.get("detected_extensions")
        posted_at = extensions.get("posted_at") if isinstance(extensions, dict) else None

        apply_url = ""
        options = item.get("apply_options")
        if isinstance(options, list) and options and isinstance(options[0], dict):
            apply_url = _as_str(options[0].get("link"))

        return cls(
            title=clean_whitespace(_as_str(item.get("title"))),
            company_name=clean_whitespace(_as_str(item.get("company_name"))),
            location=clean_whitespace(_as_str(item.get("location"))),
            posted_at=_as_str(posted_at),
            apply_url=apply_url or APPLY_LINK_UNAVAILABLE,
        )


class SectionKind(str, Enum):
    """Outcome of one role query."""

    RESULTS = "results"
    NO_RESULTS = "no_results"
    QUOTA_SKIPPED = "quota_skipped"
    QUOTA_TRIGGERED = "quota_triggered"


@dataclass(frozen=True)
class ReportSection:
    """One role's block of the report email."""

    role: str
    kind: SectionKind
    postings: tuple[JobPosting, ...] = field(default_factory=tuple)
    message: str = ""

    @classmethod
    def from_postings(cls, role: str, postings: list[JobPosting]) -> ReportSection:
        if not postings:
            return cls(role=role, kind=SectionKind.NO_RESULTS)
        return cls(role=role, kind=SectionKind.RESULTS, postings=tuple(postings))

    @classmethod
    def quota_triggered(cls, role: str, message: str) -> ReportSection:
        return cls(role=role, kind=SectionKind.QUOTA_TRIGGERED, message=message)

    @classmethod
    def quota_skipped(cls, role: str) -> ReportSection:
        return cls(role=role, kind=SectionKind.QUOTA_SKIPPED)


class QuotaPhase(str, Enum):
    """Quota latch: once ``LATCHED`` a run never returns to ``NORMAL``."""

    NORMAL = "normal"
    LATCHED = "latched"
