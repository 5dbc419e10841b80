"""Seed the demo dataset (tenants, categories, services) into the document store.

Writes only into empty collections, so running it twice is harmless. With
--reset, tenants and services are deleted first and then seeded again.

Usage:
    uv run python -m scripts.seed_firestore [--reset]

Requires: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH, and
ENVIRONMENT=development (or ALLOW_SEED=true).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.domain.exceptions import DevelopmentOnlyException
from app.infrastructure.firebase import close_firebase, get_document_store, init_firebase
from app.infrastructure.firebase.services import FirestoreSeedService
from app.shared.telemetry.logging import setup_logging


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees FIREBASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(reset: bool) -> int:
    settings = get_settings()
    setup_logging()
    if not init_firebase(settings):
        print("Document store could not be initialized; check Firebase credentials.", file=sys.stderr)
        return 1
    store = get_document_store()
    try:
        service = FirestoreSeedService(store, settings)
        result = await (service.reset() if reset else service.seed())
    except DevelopmentOnlyException as e:
        print(e.message, file=sys.stderr)
        return 2
    finally:
        await close_firebase()

    if result.written:
        print(
            f"Seeded {result.tenants} tenants, {result.categories} categories, "
            f"{result.services} services."
        )
    else:
        print("Store already populated; nothing written.")
    return 0


def main() -> None:
    _load_env()
    reset = "--reset" in sys.argv[1:]
    sys.exit(asyncio.run(run(reset)))


if __name__ == "__main__":
    main()
