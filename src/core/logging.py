"""Logging configuration"""

import sys

from loguru import logger

from src.core.config import EngineConfig


def setup_logging(config: EngineConfig | None = None) -> None:
    """Replace loguru's default handler with a single stderr sink at the configured level."""
    config = config or EngineConfig()
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )
    logger.debug(f"Logging configured at level: {config.log_level}")
