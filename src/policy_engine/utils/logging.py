"""Loguru sink configuration driven by ``LoggingConfig``."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_config


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Replace loguru's default handler with the configured sinks.

    Args:
        config: Logging settings; the global configuration is used when omitted
    """
    config = config or get_config().logging

    logger.remove()
    logger.add(sys.stderr, level=config.level, format=config.format)

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.file,
            level=config.level,
            format=config.format,
            rotation=config.rotation,
            retention=config.retention,
            encoding="utf-8",
        )

    logger.debug(f"Logging configured at level {config.level}")
