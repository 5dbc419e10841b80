"""Shared utilities: datetime, generators, sanitization, UNSET sentinel, formatting."""

from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import generate_cuid
from app.shared.utils.sanitization import InputSanitizer, validate_identifier
from app.shared.utils.unset import UNSET, is_unset, none_as_unset, strip_unset

__all__ = [
    "UNSET",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "InputSanitizer",
    "is_unset",
    "none_as_unset",
    "strip_unset",
    "validate_identifier",
]
