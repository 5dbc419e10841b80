"""Input sanitization for guest- and admin-supplied text."""

import html
import re
from typing import Any, ClassVar
from urllib.parse import urlsplit

import nh3


class InputSanitizer:
    """
    Sanitize user inputs before they are written to the document store.

    The store does not validate shapes, so these helpers are the only
    guard against markup or oversized values reaching other tenants' UIs.
    """

    MAX_TEXT_LENGTH: ClassVar[int] = 10_000
    MAX_EMAIL_LENGTH: ClassVar[int] = 254
    MAX_PHONE_LENGTH: ClassVar[int] = 20
    PHONE_DISALLOWED: ClassVar[re.Pattern[str]] = re.compile(r"[^0-9+\-\s()]")
    IDENTIFIER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9_-]+$")

    @classmethod
    def sanitize_html(cls, value: str) -> str:
        """Remove all HTML tags with nh3 (no tags or attributes allowed)."""
        if not value:
            return value
        return nh3.clean(value, tags=set(), attributes={})

    @classmethod
    def sanitize_text(cls, value: Any) -> str:
        """Trim, strip markup and cap length. Non-strings become ''.

        Args:
            value: Raw user text (guest name, notes, descriptions).

        Returns:
            Cleaned text, at most MAX_TEXT_LENGTH characters.
        """
        if not value or not isinstance(value, str):
            return ""
        cleaned = html.unescape(cls.sanitize_html(value.strip()))
        cleaned = cleaned.replace("<", "").replace(">", "")
        return cleaned[: cls.MAX_TEXT_LENGTH]

    @classmethod
    def sanitize_email(cls, value: Any) -> str:
        """Trim and lowercase an address already checked by EmailStr; non-strings become ''."""
        if not value or not isinstance(value, str):
            return ""
        return value.strip().lower()[: cls.MAX_EMAIL_LENGTH]

    @classmethod
    def sanitize_phone(cls, value: Any) -> str:
        """Keep digits and common separators (+ - space parentheses)."""
        if not value or not isinstance(value, str):
            return ""
        return cls.PHONE_DISALLOWED.sub("", value).strip()[: cls.MAX_PHONE_LENGTH]

    @classmethod
    def sanitize_url(cls, value: Any) -> str:
        """Return the URL only when it is absolute http(s), else ''."""
        if not value or not isinstance(value, str):
            return ""
        candidate = value.strip()
        try:
            parts = urlsplit(candidate)
        except ValueError:
            return ""
        if parts.scheme not in ("http", "https") or not parts.netloc:
            return ""
        return candidate

    @classmethod
    def sanitize_identifier(cls, value: str) -> str:
        """Validate identifiers (IDs, slugs). Allows alphanumeric, underscore, hyphen.

        Raises:
            ValueError: If format is invalid.
        """
        if not value:
            return value
        if not cls.IDENTIFIER_PATTERN.match(value):
            raise ValueError("Invalid identifier format")
        return value


def validate_identifier(value: str) -> str:
    """Validate and return identifier; raises ValueError if invalid."""
    return InputSanitizer.sanitize_identifier(value)
