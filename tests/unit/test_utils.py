"""Tests for jobfetch.utils — email_utils and text_utils."""

from __future__ import annotations

import pytest

from jobfetch.utils.email_utils import extract_address, validate_email
from jobfetch.utils.text_utils import clean_whitespace, normalize_text, pluralize


# ── email_utils: validate_email ──────────────────────────────────────────────


class TestValidateEmail:
    """Tests for validate_email — RFC-5322 simplified."""

    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "first.last@company.co.uk",
            "user+tag@gmail.com",
            "a@b.cd",
            "Job Digest <jobs@example.com>",
            "<jobs@example.com>",
        ],
    )
    def test_valid_emails(self, email: str) -> None:
        assert validate_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "not-an-email",
            "@no-local.com",
            "no-domain@",
            "no-tld@domain",
            "spaces in@email.com",
            "user@domain..com",
            "Name <not-an-email>",
        ],
    )
    def test_invalid_emails(self, email: str) -> None:
        assert validate_email(email) is False

    def test_none_returns_false(self) -> None:
        assert validate_email(None) is False  # type: ignore[arg-type]


class TestExtractAddress:
    def test_named_address(self) -> None:
        assert extract_address("Jobs Bot <bot@example.com>") == "bot@example.com"

    def test_bare_address(self) -> None:
        assert extract_address("  bot@example.com ") == "bot@example.com"

    def test_empty(self) -> None:
        assert extract_address("") == ""


# ── text_utils ───────────────────────────────────────────────────────────────


class TestNormalizeText:
    def test_lowercases_and_trims(self) -> None:
        assert normalize_text("  Staff ENGINEER ") == "staff engineer"

    @pytest.mark.parametrize("value", [None, "", 42])
    def test_non_text_is_empty(self, value: object) -> None:
        assert normalize_text(value) == ""  # type: ignore[arg-type]


class TestCleanWhitespace:
    def test_collapses_spaces_and_tabs(self) -> None:
        assert clean_whitespace("  a \t  b   c ") == "a b c"

    def test_empty(self) -> None:
        assert clean_whitespace("") == ""


class TestPluralize:
    def test_singular(self) -> None:
        assert pluralize(1, "search", "searches") == "search"

    @pytest.mark.parametrize("count", [0, 2, 250])
    def test_plural(self, count: int) -> None:
        assert pluralize(count, "search", "searches") == "searches"

    def test_default_plural_appends_s(self) -> None:
        assert pluralize(3, "role") == "roles"
