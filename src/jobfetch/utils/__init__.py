"""Utility functions for text normalisation and email address validation."""

from jobfetch.utils.email_utils import extract_address, validate_email
from jobfetch.utils.text_utils import clean_whitespace, normalize_text, pluralize

__all__ = [
    "clean_whitespace",
    "extract_address",
    "normalize_text",
    "pluralize",
    "validate_email",
]
