"""Centralized logging configuration for the application."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def configure_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Replace loguru's default sink with the application sinks.

    Safe to call more than once; later calls reconfigure from scratch.
    """
    logger.remove()
    logger.add(sys.stderr, colorize=True, format=CONSOLE_FORMAT, level=level)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "app.log",
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            format=FILE_FORMAT,
            level=level,
        )
        logger.add(
            log_dir / "error.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=FILE_FORMAT,
            level="ERROR",
        )

