"""Exception hierarchy for jobfetch.

Everything except ``QuotaExceeded`` is fatal for a run and ends with a
non-zero exit status.
"""

from __future__ import annotations


class JobFetchError(Exception):
    """Base class for all jobfetch errors."""


class ConfigurationError(JobFetchError):
    """A required setting is missing, empty or malformed."""


class QuotaLookupError(JobFetchError):
    """The SerpAPI account endpoint failed or returned no usable count."""


class QuotaExceeded(JobFetchError):
    """A search was refused because the SerpAPI quota is used up."""


class SearchError(JobFetchError):
    """A search failed for any reason other than quota exhaustion."""


class NotificationError(JobFetchError):
    """The final report email could not be delivered."""
