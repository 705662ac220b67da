"""
Logging setup for the console and batch layers.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger as _logger

from data.config import LOG_FILE, LOG_LEVEL

_LOG_INITIALISED = False


def configure(log_path: Optional[str] = None, level: str = LOG_LEVEL) -> None:
    """Configure loguru once: a console sink plus a rotating file sink."""
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=level)
    _logger.add(
        log_path or LOG_FILE,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True
