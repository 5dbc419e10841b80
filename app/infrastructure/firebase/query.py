"""Query building blocks shared by the REST and in-memory Firestore clients."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Sequence
from typing import Any, Literal

from app.infrastructure.firebase.timestamps import Timestamp

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"

Direction = Literal["ASCENDING", "DESCENDING"]

# Field path that orders by document id
DOCUMENT_ID = "__name__"

# Python op -> Firestore REST FieldFilter.Operator
OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array-contains": "ARRAY_CONTAINS",
    "array_contains": "ARRAY_CONTAINS",
}


@dataclass(frozen=True)
class FieldFilter:
    """Single-field filter, e.g. FieldFilter('tenantId', '==', 't1')."""

    field: str
    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in OP_MAP:
            raise ValueError(f"Unsupported filter operator: {self.op!r}")


@dataclass(frozen=True)
class OrderBy:
    """Ordering clause; direction is ASCENDING or DESCENDING."""

    field: str
    direction: Direction = ASCENDING


def _type_rank(value: Any) -> int:
    """Firestore cross-type ordering: null < bool < number < timestamp < string < bytes < array < map."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1
    if isinstance(value, (int, float)):
        return 2
    if isinstance(value, Timestamp):
        return 3
    if isinstance(value, str):
        return 4
    if isinstance(value, bytes):
        return 5
    if isinstance(value, list):
        return 7
    return 8


def sort_key(value: Any) -> tuple[int, Any]:
    rank = _type_rank(value)
    if rank in (7, 8):
        # Arrays and maps compare by their string form; good enough for local ordering.
        return rank, repr(value)
    return rank, value


def get_field(data: dict[str, Any], path: str) -> tuple[bool, Any]:
    """Resolve a dotted field path; returns (present, value)."""
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return False, None
        current = current[part]
    return True, current


def matches(data: dict[str, Any], flt: FieldFilter) -> bool:
    """Evaluate one filter against a stored document (Firestore semantics, no cross-type matches)."""
    present, value = get_field(data, flt.field)
    op = flt.op
    if op == "!=":
        return present and value is not None and value != flt.value
    if op == "not-in":
        return present and value is not None and value not in flt.value
    if not present:
        return False
    if op == "==":
        return _type_rank(value) == _type_rank(flt.value) and value == flt.value
    if op == "in":
        return value in flt.value
    if op in ("array-contains", "array_contains"):
        return isinstance(value, list) and flt.value in value
    if _type_rank(value) != _type_rank(flt.value):
        return False
    if op == "<":
        return value < flt.value
    if op == "<=":
        return value <= flt.value
    if op == ">":
        return value > flt.value
    return value >= flt.value


def is_after_cursor(values: Sequence[Any], cursor: Sequence[Any], orders: Sequence[OrderBy]) -> bool:
    """True when a row's order values sort strictly after the cursor (startAfter semantics)."""
    for value, anchor, order in zip(values, cursor, orders):
        row_key, anchor_key = sort_key(value), sort_key(anchor)
        if row_key == anchor_key:
            continue
        if order.direction == DESCENDING:
            return row_key < anchor_key
        return row_key > anchor_key
    return False
