"""Logging setup for the API process and the seed script."""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request HTTP logs from the Firestore REST client are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "google.auth")


def setup_logging() -> None:
    """Configure root logging to stdout: DEBUG when settings.debug, else INFO."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stdout)])
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
