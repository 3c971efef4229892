# -*- coding: utf-8 -*-
"""
Logging for the listing wizard.

All modules log through children of the "listing_wizard" logger:
a rotating file (everything) and stdout (Config.LOG_LEVEL and above).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "listing_wizard"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_logger: Optional[logging.Logger] = None


def _file_handler(log_path: Path, max_bytes: int, backup_count: int, datefmt: str) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=datefmt))
    return handler


def _console_handler(level_name: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(log_path: Optional[Path] = None, console_level: Optional[str] = None) -> logging.Logger:
    """
    Build the application logger.

    Args:
        log_path: Log file (defaults to Config.LOG_PATH)
        console_level: Console threshold name (defaults to Config.LOG_LEVEL)

    Returns:
        The configured "listing_wizard" logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    logger.addHandler(_file_handler(
        log_path or Config.LOG_PATH,
        Config.LOG_MAX_BYTES,
        Config.LOG_BACKUP_COUNT,
        Config.DATETIME_FORMAT,
    ))
    logger.addHandler(_console_handler(console_level or Config.LOG_LEVEL))

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the application logger, setting it up on first use."""
    if _logger is None:
        setup_logger()
    return _logger.getChild(name)
