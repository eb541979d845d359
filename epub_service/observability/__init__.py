"""
Observability module.

Provides logging configuration, correlation ID tracking and request logging.
"""

from epub_service.observability.correlation import get_correlation_id, set_correlation_id
from epub_service.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
