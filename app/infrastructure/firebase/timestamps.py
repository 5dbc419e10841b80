"""Firestore timestamp type and conversion to/from Python datetimes.

Documents keep date/time values as ``Timestamp`` (seconds + nanos since the
Unix epoch, UTC), the store's native representation. Application code only
sees timezone-aware UTC ``datetime`` values; conversion happens at the
document store boundary in both directions, at any nesting depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any

from app.shared.utils.datetime import ensure_utc

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Timestamp:
    """Firestore native timestamp (UTC). nanos is in [0, 1e9)."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < _NANOS_PER_SECOND:
            raise ValueError("Timestamp nanos must be in [0, 1e9)")

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        """Build from a datetime; naive values are taken as UTC."""
        delta = ensure_utc(value) - _EPOCH
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        seconds, rem_micros = divmod(micros, 1_000_000)
        return cls(seconds=seconds, nanos=rem_micros * 1_000)

    def to_datetime(self) -> datetime:
        """Return a UTC-aware datetime (microsecond precision; sub-micro nanos dropped)."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1_000)

    def to_rfc3339(self) -> str:
        """RFC 3339 string used by the Firestore REST API ('...T..:..:..[.fffffffff]Z')."""
        base = (_EPOCH + timedelta(seconds=self.seconds)).strftime("%Y-%m-%dT%H:%M:%S")
        if self.nanos:
            return f"{base}.{self.nanos:09d}Z"
        return f"{base}Z"

    @classmethod
    def from_rfc3339(cls, value: str) -> Timestamp:
        """Parse the REST API timestampValue (up to nanosecond precision)."""
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1]
            offset = timedelta(0)
        else:
            # '+hh:mm' / '-hh:mm' suffix
            sign = 1 if text[-6] == "+" else -1
            hours, minutes = int(text[-5:-3]), int(text[-2:])
            offset = sign * timedelta(hours=hours, minutes=minutes)
            text = text[:-6]
        fraction = ""
        if "." in text:
            text, fraction = text.split(".", 1)
        whole = datetime.strptime(text, "%Y-%m-%dT%H:%M:%S").replace(tzinfo=UTC) - offset
        delta = whole - _EPOCH
        seconds = delta.days * 86_400 + delta.seconds
        nanos = int((fraction + "000000000")[:9]) if fraction else 0
        return cls(seconds=seconds, nanos=nanos)


def to_store_timestamp(value: datetime) -> Timestamp:
    """Convert a datetime to the store's native timestamp."""
    return Timestamp.from_datetime(value)


def from_store_timestamp(value: Timestamp) -> datetime:
    """Convert a store timestamp to a UTC-aware datetime."""
    return value.to_datetime()


def encode_timestamps(value: Any) -> Any:
    """Recursively replace datetime (and date) values with Timestamp for a write."""
    if isinstance(value, datetime):
        return to_store_timestamp(value)
    if isinstance(value, date):
        return to_store_timestamp(datetime(value.year, value.month, value.day, tzinfo=UTC))
    if isinstance(value, dict):
        return {k: encode_timestamps(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_timestamps(v) for v in value]
    return value


def decode_timestamps(value: Any) -> Any:
    """Recursively replace Timestamp values with UTC datetimes after a read."""
    if isinstance(value, Timestamp):
        return from_store_timestamp(value)
    if isinstance(value, dict):
        return {k: decode_timestamps(v) for k, v in value.items()}
    if isinstance(value, list):
        return [decode_timestamps(v) for v in value]
    return value
