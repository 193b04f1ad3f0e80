"""Logging setup for the feedback service.

Configured once from `LOG_LEVEL`. Every request is logged by the app
middleware as `METHOD /path?query`, so uvicorn's own access log is quieted.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import get_settings

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger on first call; later calls are no-ops."""
    global _configured
    if _configured:
        return

    settings = get_settings()
    log_level = (level or settings.log_level or "INFO").upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
