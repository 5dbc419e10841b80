"""Tests for local filter evaluation (Firestore semantics)."""

import pytest

from app.infrastructure.firebase.query import FieldFilter, get_field, matches, sort_key


def test_unknown_operator_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported"):
        FieldFilter("slug", "~=", "acme")


def test_equality_is_exact_and_case_sensitive() -> None:
    doc = {"slug": "acme"}
    assert matches(doc, FieldFilter("slug", "==", "acme"))
    assert not matches(doc, FieldFilter("slug", "==", "Acme"))


def test_equality_does_not_cross_types() -> None:
    assert not matches({"order": 1}, FieldFilter("order", "==", True))
    assert not matches({"order": 1}, FieldFilter("order", "==", "1"))


def test_missing_field_never_matches() -> None:
    assert not matches({}, FieldFilter("tenantId", "==", "t1"))
    assert not matches({}, FieldFilter("tenantId", "!=", "t1"))


def test_range_and_membership_operators() -> None:
    doc = {"order": 5, "tags": ["a", "b"]}
    assert matches(doc, FieldFilter("order", ">", 4))
    assert matches(doc, FieldFilter("order", "<=", 5))
    assert not matches(doc, FieldFilter("order", "<", "9"))
    assert matches(doc, FieldFilter("order", "in", [1, 5]))
    assert matches(doc, FieldFilter("order", "not-in", [1, 2]))
    assert matches(doc, FieldFilter("tags", "array-contains", "b"))


def test_dotted_field_paths() -> None:
    doc = {"contact": {"email": "a@b.com"}}
    assert get_field(doc, "contact.email") == (True, "a@b.com")
    assert get_field(doc, "contact.phone") == (False, None)
    assert matches(doc, FieldFilter("contact.email", "==", "a@b.com"))


def test_sort_key_orders_types_like_firestore() -> None:
    values = ["b", 2, None, True, "a", 1.5]
    assert sorted(values, key=sort_key) == [None, True, 1.5, 2, "a", "b"]
