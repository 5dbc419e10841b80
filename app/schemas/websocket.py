"""WebSocket frame schemas for /ws/{collection}."""

from typing import Any, Literal

from pydantic import BaseModel


class SnapshotFrame(BaseModel):
    type: Literal["snapshot"] = "snapshot"
    collection: str
    items: list[dict[str, Any]]


class ErrorFrame(BaseModel):
    type: Literal["error"] = "error"
    collection: str
    message: str
