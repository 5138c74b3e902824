"""Render report sections into the plain-text email body."""

from __future__ import annotations

from collections.abc import Iterable

from jobfetch.config.defaults import (
    NO_RESULTS_TEXT,
    POSTED_AT_UNKNOWN,
    QUOTA_SKIPPED_TEXT,
    QUOTA_TRIGGERED_DEFAULT,
    QUOTA_TRIGGERED_FOOTER,
)
from jobfetch.core.models import JobPosting, ReportSection, SectionKind

SECTION_SEPARATOR = "\n\n"


def format_posting(posting: JobPosting) -> str:
    """Render one posting as a five-line block."""
    return "\n".join(
        [
            f"Title: {posting.title}",
            f"Company: {posting.company_name}",
            f"Location: {posting.location}",
            f"Posted: {posting.posted_at or POSTED_AT_UNKNOWN}",
            f"Apply: {posting.apply_url}",
        ]
    )


def format_section(section: ReportSection) -> str:
    """Render one role's section."""
    header = f"Role: {section.role}"

    if section.kind is SectionKind.RESULTS:
        blocks = "\n\n".join(format_posting(p) for p in section.postings)
        return f"{header}\n{blocks}"

    if section.kind is SectionKind.NO_RESULTS:
        return f"{header}\n{NO_RESULTS_TEXT}"

    if section.kind is SectionKind.QUOTA_TRIGGERED:
        message = section.message or QUOTA_TRIGGERED_DEFAULT
        return f"{header}\n{message}\n{QUOTA_TRIGGERED_FOOTER}"

    return f"{header}\n{QUOTA_SKIPPED_TEXT}"


def build_report_body(sections: Iterable[ReportSection]) -> str:
    """Join all rendered sections, in order, separated by a blank line."""
    return SECTION_SEPARATOR.join(format_section(s) for s in sections)
