# -*- coding: utf-8 -*-
"""
Logging configuration.

One ``idecide`` logger writes DEBUG and above to a rotating file and the
configured level to the console. Modules log through ``get_logger(__name__)``.
Every record is stamped with the signed-in user (``user=-`` when nobody is
signed in), since all store traffic is scoped to that user.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "idecide"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | user=%(user_id)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


class UserContextFilter(logging.Filter):
    """Adds ``user_id`` to every record passing through a handler."""

    def __init__(self):
        super().__init__()
        self.user_id: Optional[str] = None

    def filter(self, record: logging.LogRecord) -> bool:
        record.user_id = self.user_id or "-"
        return True


_user_filter = UserContextFilter()


def set_log_user(user_id: Optional[str]):
    """Stamp later log records with ``user_id`` (None clears it)."""
    _user_filter.user_id = user_id


def setup_logger(log_path: Optional[Union[str, Path]] = None,
                 console_level: Optional[str] = None) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Args:
        log_path: Log file; defaults to Config.LOG_PATH
        console_level: Level name for the console; defaults to Config.LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level_name = (console_level or Config.LOG_LEVEL).upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    file_handler.addFilter(_user_filter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level_name, logging.INFO))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.addFilter(_user_filter)
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
