"""Development seeding and reset of the Firestore collections.

Seeding is an idempotent bootstrap: it writes the fixed demo dataset only
into empty collections. Reset wipes collections and seeds again. Both are
development tools and refuse to run elsewhere unless ALLOW_SEED is set.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from app.core.config import Settings, get_settings
from app.domain.exceptions import DevelopmentOnlyException
from app.infrastructure.firebase.collections import (
    COLLECTION_CATEGORIES,
    COLLECTION_SERVICES,
    COLLECTION_TENANTS,
)
from app.infrastructure.firebase.document_store import DocumentStore
from app.infrastructure.firebase.services.seed_data import (
    SEED_CATEGORIES,
    SEED_TENANTS,
    seed_services,
)

logger = logging.getLogger(__name__)

DEFAULT_RESET_COLLECTIONS: tuple[str, ...] = (COLLECTION_TENANTS, COLLECTION_SERVICES)

# Process-level guard for seed_once(); the lock also serializes seed and reset.
_seeded_once = False
_lock: asyncio.Lock | None = None
_lock_loop: asyncio.AbstractEventLoop | None = None


def _get_lock() -> asyncio.Lock:
    """Lock bound to the running loop (a new loop, e.g. per test, gets a new lock)."""
    global _lock, _lock_loop
    loop = asyncio.get_running_loop()
    if _lock is None or _lock_loop is not loop:
        _lock = asyncio.Lock()
        _lock_loop = loop
    return _lock


def reset_seed_guard() -> None:
    """Forget that seed_once() ran (tests)."""
    global _seeded_once
    _seeded_once = False


@dataclass(frozen=True)
class SeedResult:
    """Number of documents written per collection."""

    tenants: int = 0
    categories: int = 0
    services: int = 0

    @property
    def written(self) -> bool:
        return bool(self.tenants or self.categories or self.services)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def _with_ids(documents: list[dict[str, Any]]) -> list[tuple[str, dict[str, Any]]]:
    return [(d["id"], {k: v for k, v in d.items() if k != "id"}) for d in documents]


class FirestoreSeedService:
    """Seeds an empty store with the demo dataset; resets collections in development."""

    def __init__(self, store: DocumentStore, settings: Settings | None = None) -> None:
        self._store = store
        self._settings = settings or get_settings()

    def _ensure_allowed(self, operation: str) -> None:
        if not self._settings.seed_allowed:
            raise DevelopmentOnlyException(operation)

    async def _seed(self) -> SeedResult:
        tenants = categories = services = 0
        tenant_count = await self._store.count(COLLECTION_TENANTS)
        service_count = await self._store.count(COLLECTION_SERVICES)
        if tenant_count == 0 and service_count == 0:
            tenants = await self._store.write_many(COLLECTION_TENANTS, _with_ids(SEED_TENANTS))
            services = await self._store.write_many(COLLECTION_SERVICES, _with_ids(seed_services()))
        else:
            logger.info(
                "Seed skipped for tenants/services (%d tenants, %d services present)",
                tenant_count,
                service_count,
            )
        if await self._store.count(COLLECTION_CATEGORIES) == 0:
            categories = await self._store.write_many(COLLECTION_CATEGORIES, _with_ids(SEED_CATEGORIES))
        result = SeedResult(tenants=tenants, categories=categories, services=services)
        if result.written:
            logger.info(
                "Seeded %d tenants, %d categories, %d services",
                result.tenants,
                result.categories,
                result.services,
            )
        return result

    async def seed(self) -> SeedResult:
        """Write the demo dataset into empty collections; a populated store is left untouched."""
        self._ensure_allowed("seed")
        async with _get_lock():
            return await self._seed()

    async def seed_once(self) -> SeedResult:
        """seed() at most once per process; later calls return an empty SeedResult."""
        global _seeded_once
        self._ensure_allowed("seed")
        async with _get_lock():
            if _seeded_once:
                return SeedResult()
            result = await self._seed()
            _seeded_once = True
            return result

    async def reset(self, collections: Sequence[str] = DEFAULT_RESET_COLLECTIONS) -> SeedResult:
        """Delete every document in the given collections, then seed again."""
        self._ensure_allowed("reset")
        async with _get_lock():
            for collection in collections:
                deleted = await self._store.delete_all(collection)
                logger.info("Reset deleted %d documents from %s", deleted, collection)
            return await self._seed()
