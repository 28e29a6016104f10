"""
Logging configuration for kv-store.

Provides centralized logging setup using the application settings.
"""
import logging
from logging import handlers
from typing import List, Optional

from src.config import CommonSettings

from .constants import LOG_BACKUP_COUNT, LOG_FORMAT, LOG_MAX_BYTES


def configure_logging(settings: Optional[CommonSettings] = None) -> None:
    """Configure the logging system based on application settings."""
    if settings is None:
        settings = CommonSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handler_list: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handler_list.append(
            handlers.RotatingFileHandler(
                settings.log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
        )
    for handler in handler_list:
        handler.setFormatter(formatter)
    logging.basicConfig(
        level=level,
        handlers=handler_list,
    )
