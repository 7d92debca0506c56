"""
Central logging configuration.
Console handler always; file handler when LOG_FILE_PATH is set.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from almox.infrastructure.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level_name: Optional[str]) -> int:
    """Resolve the configured log level string to its numeric value."""
    if not level_name:
        return logging.WARNING
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure the root logger; *level_name* overrides the settings."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level_name or settings.LOG_LEVEL))
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE_PATH:
        log_dir = os.path.dirname(settings.LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(settings.LOG_FILE_PATH, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
