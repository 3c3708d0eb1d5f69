"""Apply ObservabilityConfig to the standard logging module."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from settings.

    Only entry points call this; importing the library never touches
    logging configuration.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            "Unknown log level, falling back to WARNING",
            extra={"level": config.level},
        )
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.format)
