"""Messaging: in-process listener error channel.

Used by the document store to report subscription failures and by live
stores to surface them.
"""

from app.infrastructure.messaging.listener_errors import (
    ListenerErrorChannel,
    ListenerErrorEvent,
    get_listener_error_channel,
    set_listener_error_channel,
)

__all__ = [
    "ListenerErrorChannel",
    "ListenerErrorEvent",
    "get_listener_error_channel",
    "set_listener_error_channel",
]
