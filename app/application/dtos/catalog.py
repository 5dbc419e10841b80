"""DTOs for paged catalog listings."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities import Service


@dataclass
class ServicePage:
    """One page of services, newest first.

    ``next_cursor`` is the id of the last service on the page and is only set
    when another page follows.
    """

    items: list[Service] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
