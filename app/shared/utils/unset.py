"""UNSET sentinel: a field that is absent rather than null.

Firestore rejects undefined values, so anything marked UNSET must be
removed before a write. ``None`` is a real value (stored as null);
``UNSET`` means "leave this key out entirely".
"""

from __future__ import annotations

from typing import Any, Final


class _UnsetType:
    """Singleton type for the UNSET sentinel."""

    _instance: _UnsetType | None = None

    def __new__(cls) -> _UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _UnsetType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _UnsetType:
        return self


UNSET: Final = _UnsetType()


def is_unset(value: Any) -> bool:
    """Return True if value is the UNSET sentinel."""
    return value is UNSET


def strip_unset(value: Any) -> Any:
    """Recursively drop UNSET from dicts (key removed) and lists (element removed).

    Returns a new structure; the input is not mutated. Scalars are returned as is.

    Args:
        value: Any JSON-like value (dict, list, scalar).

    Returns:
        The same value with every UNSET removed at any depth.
    """
    if isinstance(value, dict):
        return {k: strip_unset(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, (list, tuple)):
        return [strip_unset(v) for v in value if v is not UNSET]
    return value


def none_as_unset(value: Any) -> Any:
    """Recursively turn None into UNSET (optional fields that were never set).

    Used by entity-to-document mappers so an empty optional attribute never
    reaches the store as null.
    """
    if value is None:
        return UNSET
    if isinstance(value, dict):
        return {k: none_as_unset(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [none_as_unset(v) for v in value]
    return value
