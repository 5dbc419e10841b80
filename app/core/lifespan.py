"""Application lifespan: startup and shutdown.

Single place for infrastructure wiring (logging, document store, optional
dev seed, telemetry). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.firebase import (
    close_firebase,
    get_document_store,
    init_firebase,
)
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit close the document store.

    Startup order: logging, document store, seed (when
    SEED_ON_STARTUP is set and seeding is allowed), telemetry (if enabled).
    Shutdown deactivates live WebSocket stores before the client closes,
    then flushes telemetry.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if not init_firebase(settings):
        logger.warning("Document store not configured; data endpoints will return 503")
    store = get_document_store()

    if store is not None and settings.seed_on_startup and settings.seed_allowed:
        from app.infrastructure.firebase.services import FirestoreSeedService

        result = await FirestoreSeedService(store, settings).seed_once()
        logger.info("Startup seed: %s", result.to_dict())

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    ws_manager = getattr(app.state, "ws_manager", None)
    if ws_manager is not None:
        await ws_manager.close_all()
    await close_firebase()
    logger.info("Document store closed")

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
