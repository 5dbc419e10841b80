"""Tests for InputSanitizer (guest and admin text)."""

import pytest

from app.shared.utils.sanitization import InputSanitizer, validate_identifier


def test_sanitize_text_strips_markup_and_whitespace() -> None:
    assert InputSanitizer.sanitize_text("  <b>Ana</b> ") == "Ana"
    assert InputSanitizer.sanitize_text("Tom & Jerry") == "Tom & Jerry"


def test_sanitize_text_non_string_is_empty() -> None:
    assert InputSanitizer.sanitize_text(None) == ""
    assert InputSanitizer.sanitize_text(42) == ""


def test_sanitize_text_caps_length() -> None:
    long_text = "x" * (InputSanitizer.MAX_TEXT_LENGTH + 50)
    assert len(InputSanitizer.sanitize_text(long_text)) == InputSanitizer.MAX_TEXT_LENGTH


def test_sanitize_email() -> None:
    assert InputSanitizer.sanitize_email(" Ana@Example.COM ") == "ana@example.com"
    assert InputSanitizer.sanitize_email(None) == ""


def test_sanitize_phone() -> None:
    assert InputSanitizer.sanitize_phone("+387 (61) 123-456<script>") == "+387 (61) 123-456"


def test_sanitize_url() -> None:
    assert InputSanitizer.sanitize_url("https://stayplus.test/logo.png") == "https://stayplus.test/logo.png"
    assert InputSanitizer.sanitize_url("javascript:alert(1)") == ""
    assert InputSanitizer.sanitize_url("/relative/path") == ""


def test_validate_identifier() -> None:
    assert validate_identifier("airport-transfer_2") == "airport-transfer_2"
    with pytest.raises(ValueError, match="Invalid identifier"):
        validate_identifier("drop table;")
