"""Centralized logging configuration."""

import logging
import sys
from typing import Optional

from medlens.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, name: str = "medlens") -> logging.Logger:
    """
    Configure and return a service logger.

    Args:
        level: Level name such as "debug" or "WARNING"; defaults to LOG_LEVEL
        name: Logger name; child loggers of "medlens" share its handler

    Calling again only adjusts the level, so handlers are never duplicated.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    logger.debug(f"Logging configured with level: {level_name}")

    return logger


# Create the global logger instance
logger = setup_logging()
