"""Pure email address validation.

No network calls, just regex matching.
"""

from __future__ import annotations

import re

# RFC-5322 simplified: local@domain.tld (2+ char TLD, no consecutive dots)
EMAIL_REGEX: re.Pattern[str] = re.compile(
    r"^[a-zA-Z0-9._%+-]+@(?!.*\.\.)[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

# Resend accepts "Display Name <address@domain>" in the from/to fields
_NAMED_ADDRESS = re.compile(r"^[^<>]*<([^<>]+)>\s*$")


def extract_address(value: str) -> str:
    """Return the bare address from ``"Name <addr>"`` or *value* itself."""
    if not value or not isinstance(value, str):
        return ""
    match = _NAMED_ADDRESS.match(value.strip())
    if match:
        return match.group(1).strip()
    return value.strip()


def validate_email(email: str) -> bool:
    """Return True if *email* (optionally with a display name) looks valid."""
    if not email or not isinstance(email, str):
        return False
    return EMAIL_REGEX.match(extract_address(email)) is not None
