"""Process-wide logging setup."""

from __future__ import annotations

import logging

from catalog.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Apply the configured level and format to the root logger."""
    level = logging.DEBUG if settings.debug else settings.logging.level.upper()
    logging.basicConfig(level=level, format=settings.logging.format)
    logging.getLogger("catalog").setLevel(level)


__all__ = ["configure_logging"]
