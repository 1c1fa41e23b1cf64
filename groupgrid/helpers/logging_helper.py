"""
Logging helpers for safe error handling and message sanitization.

This module provides utilities to prevent information leakage through
error messages while preserving detailed logging for debugging.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure logging once for the whole process.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric logging level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    Logs the full exception for debugging and returns a generic message
    that is safe to put in an HTTP response body.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display
    """
    logger.error(f"[security] Exception sanitized: {e}", exc_info=e)
    return safe_message
