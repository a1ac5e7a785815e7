"""Runtime logging helpers."""

from __future__ import annotations

import sys
from typing import Literal

from loguru import logger

LogFormat = Literal["text", "json"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED: tuple[str, str] | None = None


def configure_logging(level: str = "INFO", log_format: LogFormat = "text") -> None:
    """Configure process-level logging once.

    Logs always go to stderr: stdout carries the stdio protocol stream.
    """
    global _CONFIGURED
    level = level.upper()
    if _CONFIGURED == (level, log_format):
        return

    logger.remove()
    if log_format == "json":
        logger.add(sys.stderr, level=level, serialize=True, backtrace=False, diagnose=False)
    else:
        logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, backtrace=False, diagnose=False)
    _CONFIGURED = (level, log_format)
