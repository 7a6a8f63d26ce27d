"""
Observability module.

Provides logging configuration, correlation ID tracking, and
request logging middleware.
"""

from portal_messaging.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from portal_messaging.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
