"""Shared utilities: enums and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.enums import ListenerContext, StoreState
from app.shared.utils import (
    UNSET,
    ensure_utc,
    generate_cuid,
    strip_unset,
    utc_now,
)

__all__ = [
    "ListenerContext",
    "StoreState",
    "UNSET",
    "generate_cuid",
    "strip_unset",
    "utc_now",
    "ensure_utc",
]
