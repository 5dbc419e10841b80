"""WebSocket connection manager: one live store per connection.

Used by the /ws endpoint; held on app.state.ws_manager.
"""

from app.api.websocket.manager import ConnectionManager

__all__ = ["ConnectionManager"]
