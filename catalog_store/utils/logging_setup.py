"""
==============================================================================
Logging Setup Module
==============================================================================

Process-level logging configuration for applications embedding the
catalog store. Stores themselves never configure logging; they write to
the logger they are given.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from catalog_store.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use (global settings if None)
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format=settings.log_format,
    )

    logging.getLogger(__name__).debug(
        f"Logging configured for {settings.app_name} at {logging.getLevelName(settings.log_level_value)}"
    )
