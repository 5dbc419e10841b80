"""Service interfaces (ports) for the application layer.

Protocols define contracts for infrastructure services used by live stores.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from app.shared.enums import ListenerContext


class IListenerError(Protocol):
    """A listener failure as seen by subscribers."""

    context: ListenerContext
    message: str
    code: str | None


class IListenerErrorChannel(Protocol):
    """Process-wide broadcast of listener failures (DIP)."""

    def subscribe(self, callback: Callable[[IListenerError], None]) -> Callable[[], None]:
        """Register callback; returns unsubscribe."""

    def publish(self, event: IListenerError) -> None:
        """Deliver event to every subscriber."""
