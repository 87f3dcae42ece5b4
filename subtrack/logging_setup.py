"""Root logger configuration."""

from __future__ import annotations

import logging
from typing import Optional

from subtrack.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level = logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)
