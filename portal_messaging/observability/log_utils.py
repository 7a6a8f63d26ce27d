"""
Logging helpers for route and WebSocket failures.

Client-supplied text (raw frames, ids from the path) ends up in log
records, so it is clipped to a short single-line preview first.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

PREVIEW_LENGTH = 120


def preview(value: Any, limit: int = PREVIEW_LENGTH) -> str:
    """
    Render a value as a clipped single-line string for a log record.

    Args:
        value: Frame text, bytes, id, or any other context value
        limit: Maximum characters kept before the clip marker

    Returns:
        str: Printable preview, with the original length when clipped
    """
    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="replace")
    else:
        text = str(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with its traceback and previewed context fields.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: Extra fields such as handler name or raw frame
    """
    extra = {key: preview(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = preview(exc)
    logger.exception(message, extra=extra)
