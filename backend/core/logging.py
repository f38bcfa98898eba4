"""
Centralized logging configuration.

This module provides a single place to configure logging for the whole library.
Call setup_logging() once when the host process starts.
"""

import logging
from typing import Optional

# Third-party loggers that are too chatty at DEBUG level
NOISY_LOGGERS = ("aiosqlite", "asyncio", "sqlalchemy.pool")


def setup_logging(debug_mode: bool = False, log_level: Optional[int] = None, sql_echo: bool = False) -> None:
    """
    Configure process-wide logging.

    This function should be called once at startup, before any other
    logging occurs. It configures the root logger and tones down noisy libraries.

    Args:
        debug_mode: If True, set log level to DEBUG (unless log_level is explicitly provided)
        log_level: Explicit log level to use (overrides debug_mode)
        sql_echo: If True, log every SQL statement issued by SQLAlchemy
    """
    # Determine log level
    if log_level is None:
        log_level = logging.DEBUG if debug_mode else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.INFO))

    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)

    # Log the configuration
    logger = logging.getLogger("Logging")
    level_name = logging.getLevelName(log_level)
    logger.info(f"Logging configured with level: {level_name}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    This is a convenience wrapper around logging.getLogger that ensures
    consistent logger naming across the library.

    Args:
        name: Name for the logger (typically __name__ or a descriptive string)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
