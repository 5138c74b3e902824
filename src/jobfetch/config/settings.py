"""Pydantic-based settings loaded entirely from environment variables.

All configuration is read from ``.env`` (or real env vars). Required values
default to empty; ``check_required`` reports every missing one at once.

Usage::

    from jobfetch.config import load_settings
    settings = load_settings()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from jobfetch.errors import ConfigurationError
from jobfetch.utils.email_utils import validate_email

# ---------------------------------------------------------------------------
# Type alias: env var string "a,b,c" → list[str]
# ---------------------------------------------------------------------------
CsvList = Annotated[list[str], NoDecode]


def parse_role_queries(raw: object) -> list[str]:
    """Split a comma-separated role list, dropping blank entries.

    >>> parse_role_queries(" Eng Mgr , , Staff Eng ")
    ['Eng Mgr', 'Staff Eng']
    """
    if isinstance(raw, str):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if isinstance(raw, (list, tuple)):
        return [str(item).strip() for item in raw if str(item).strip()]
    return []


class Settings(BaseSettings):
    """Central configuration; every field maps to an UPPER_SNAKE env var."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- SerpAPI ------------------------------------------------------------
    serpapi_key: str = ""

    # -- Resend -------------------------------------------------------------
    resend_api_key: str = ""
    sender_email_address: str = ""
    to_email_address: str = ""

    # -- Search -------------------------------------------------------------
    role_query: CsvList = Field(default_factory=list)

    # -- General ------------------------------------------------------------
    request_timeout_seconds: int = 30
    dry_run: bool = False
    log_level: str = "INFO"

    @field_validator("role_query", mode="before")
    @classmethod
    def split_csv(cls, value: object) -> list[str]:
        """Convert comma-separated env string to list."""
        return parse_role_queries(value)

    @field_validator(
        "serpapi_key",
        "resend_api_key",
        "sender_email_address",
        "to_email_address",
        mode="before",
    )
    @classmethod
    def strip_value(cls, value: object) -> object:
        """Trim surrounding whitespace so a blank value counts as missing."""
        if isinstance(value, str):
            return value.strip()
        return value

    def check_required(self) -> Settings:
        """Raise ``ConfigurationError`` listing every missing or bad value."""
        missing = [
            env_name
            for env_name, value in (
                ("SERPAPI_KEY", self.serpapi_key),
                ("RESEND_API_KEY", self.resend_api_key),
                ("SENDER_EMAIL_ADDRESS", self.sender_email_address),
                ("TO_EMAIL_ADDRESS", self.to_email_address),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: " + ", ".join(missing)
            )

        if not self.role_query:
            raise ConfigurationError(
                "ROLE_QUERY must include at least one non-empty role query"
            )

        for env_name, address in (
            ("SENDER_EMAIL_ADDRESS", self.sender_email_address),
            ("TO_EMAIL_ADDRESS", self.to_email_address),
        ):
            if not validate_email(address):
                raise ConfigurationError(f"{env_name} is not a valid email address")

        if self.request_timeout_seconds < 1:
            raise ConfigurationError("REQUEST_TIMEOUT_SECONDS must be at least 1")

        return self


def load_settings() -> Settings:
    """Build settings from the environment and verify required values."""
    return get_settings().check_required()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
