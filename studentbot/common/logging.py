# studentbot/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

from studentbot.common.settings import get_settings


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(get_settings().log_level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str = "studentbot", level: Optional[int] = None) -> logging.Logger:
    """
    Return a package logger.
    If no handlers are set, we add a basicConfig once.
    Level defaults to LOG_LEVEL from settings.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
