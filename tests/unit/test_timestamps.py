"""Tests for Timestamp and datetime conversion at the store boundary."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from app.infrastructure.firebase.timestamps import (
    Timestamp,
    decode_timestamps,
    encode_timestamps,
    from_store_timestamp,
    to_store_timestamp,
)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 15, 9, 30, 12, 345678, tzinfo=UTC),
        datetime(1970, 1, 1, tzinfo=UTC),
        datetime(2038, 6, 30, 23, 59, 59, 999000, tzinfo=UTC),
    ],
)
def test_round_trip_preserves_instant(value: datetime) -> None:
    assert from_store_timestamp(to_store_timestamp(value)) == value


def test_naive_datetime_is_taken_as_utc() -> None:
    naive = datetime(2024, 2, 1, 12, 0)
    assert from_store_timestamp(to_store_timestamp(naive)) == naive.replace(tzinfo=UTC)


def test_aware_datetime_is_normalized_to_utc() -> None:
    sarajevo = timezone(timedelta(hours=1))
    local = datetime(2024, 2, 1, 13, 0, tzinfo=sarajevo)
    back = from_store_timestamp(to_store_timestamp(local))
    assert back == local
    assert back.utcoffset() == timedelta(0)


def test_from_datetime_splits_seconds_and_nanos() -> None:
    ts = Timestamp.from_datetime(datetime(1970, 1, 1, 0, 0, 1, 500, tzinfo=UTC))
    assert ts == Timestamp(seconds=1, nanos=500_000)


def test_nanos_out_of_range_rejected() -> None:
    with pytest.raises(ValueError):
        Timestamp(seconds=0, nanos=1_000_000_000)


def test_rfc3339_round_trip_keeps_nanoseconds() -> None:
    ts = Timestamp.from_rfc3339("2024-01-01T00:00:00.123456789Z")
    assert ts == Timestamp(seconds=1_704_067_200, nanos=123_456_789)
    assert ts.to_rfc3339() == "2024-01-01T00:00:00.123456789Z"


def test_rfc3339_without_fraction() -> None:
    assert Timestamp(seconds=1_704_067_200).to_rfc3339() == "2024-01-01T00:00:00Z"


def test_rfc3339_offset_is_applied() -> None:
    assert Timestamp.from_rfc3339("2024-01-01T01:00:00+01:00") == Timestamp(seconds=1_704_067_200)


def test_encode_and_decode_nested_values() -> None:
    when = datetime(2024, 3, 1, 8, 0, tzinfo=UTC)
    encoded = encode_timestamps({"createdAt": when, "history": [{"at": when}], "day": date(2024, 3, 1)})
    assert isinstance(encoded["createdAt"], Timestamp)
    assert isinstance(encoded["history"][0]["at"], Timestamp)
    assert encoded["day"] == Timestamp.from_datetime(datetime(2024, 3, 1, tzinfo=UTC))

    decoded = decode_timestamps(encoded)
    assert decoded["createdAt"] == when
    assert decoded["history"][0]["at"] == when


def test_timestamps_order_like_instants() -> None:
    earlier = to_store_timestamp(datetime(2024, 1, 1, tzinfo=UTC))
    later = to_store_timestamp(datetime(2024, 1, 1, 0, 0, 0, 1, tzinfo=UTC))
    assert earlier < later
