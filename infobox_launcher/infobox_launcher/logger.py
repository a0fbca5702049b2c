"""
Logging setup for the InfoBox launcher.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
DEFAULT_CONSOLE_LEVEL = "WARNING"


def configure(
    log_path: Optional[Path] = None,
    *,
    level: str = DEFAULT_CONSOLE_LEVEL,
    force: bool = False,
) -> None:
    """
    Configure loguru for the launcher.

    stdout is reserved for the diagnostic line, so console output goes to
    stderr only. A DEBUG file sink is added when ``log_path`` is given.
    Configuration happens once unless ``force`` is set.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED and not force:
        return

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <8} | {message}")
    if log_path is not None:
        target = Path(log_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            target,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
