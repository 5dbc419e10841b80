"""In-process broadcast of real-time listener failures.

Subscription failures never raise to whoever opened the subscription; the
document store publishes them here instead. Stores subscribe and keep only
events whose context matches the collection they own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

from app.shared.enums import ListenerContext

logger = logging.getLogger(__name__)

DEFAULT_LISTENER_ERROR_MESSAGE = "Firestore listener error"


@dataclass(frozen=True)
class ListenerErrorEvent:
    """Listener failure payload: which collection failed, and how."""

    context: ListenerContext
    message: str
    code: str | None = None

    @classmethod
    def from_exception(cls, context: ListenerContext, exc: BaseException) -> ListenerErrorEvent:
        """Build from a listener exception; code is read from the exception when it has one."""
        code = getattr(exc, "code", None)
        message = getattr(exc, "message", None) or str(exc) or DEFAULT_LISTENER_ERROR_MESSAGE
        return cls(
            context=context,
            message=message,
            code=code if isinstance(code, str) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON (WebSocket error frames, logs)."""
        data = asdict(self)
        data["context"] = self.context.value
        return data


ListenerErrorCallback = Callable[[ListenerErrorEvent], None]


class ListenerErrorChannel:
    """Synchronous pub/sub for ListenerErrorEvent; every subscriber sees every event."""

    def __init__(self) -> None:
        self._subscribers: dict[int, ListenerErrorCallback] = {}
        self._next_token = 0

    def subscribe(self, callback: ListenerErrorCallback) -> Callable[[], None]:
        """Register callback; returns an idempotent unsubscribe function."""
        token = self._next_token
        self._next_token += 1
        self._subscribers[token] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return unsubscribe

    def publish(self, event: ListenerErrorEvent) -> None:
        """Deliver event to all current subscribers in registration order."""
        logger.debug("Listener error [%s] %s: %s", event.context.value, event.code, event.message)
        for callback in list(self._subscribers.values()):
            try:
                callback(event)
            except Exception:
                logger.exception("Listener error subscriber failed")

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


_channel: ListenerErrorChannel | None = None


def get_listener_error_channel() -> ListenerErrorChannel:
    """Return the process-wide listener error channel (created on first use)."""
    global _channel
    if _channel is None:
        _channel = ListenerErrorChannel()
    return _channel


def set_listener_error_channel(channel: ListenerErrorChannel | None) -> None:
    """Replace the process-wide channel (tests reset it with None)."""
    global _channel
    _channel = channel
