"""
Structured logging helpers.

Flattens exception context into `extra` fields so failures that are logged
instead of raised (job dispatch) keep their object key, id and error type.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_LOG_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Render a value for a log field, summarizing collections and truncating.

    Args:
        value: Value to render
        max_length: Maximum rendered length

    Returns:
        str: Log-safe string
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def exception_log_fields(exc: BaseException) -> dict[str, str]:
    """
    Extract log fields from an exception.

    Exceptions carrying a `details` dict (the service hierarchy) contribute
    it as fields; their message is logged without the details suffix.
    """
    details = getattr(exc, "details", None)
    if isinstance(details, dict):
        fields = {name: safe_log_value(val) for name, val in details.items()}
        fields["error_msg"] = safe_log_value(getattr(exc, "message", str(exc)))
    else:
        fields = {"error_msg": safe_log_value(str(exc))}
    fields["error_type"] = type(exc).__name__
    return fields


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR with traceback and flattened context.

    Explicit context wins over fields taken from the exception.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional fields (epub_id, version_tag, ...)
    """
    extra = exception_log_fields(exc)
    extra.update({name: safe_log_value(val) for name, val in context.items()})
    logger.error(message, exc_info=exc, extra=extra)
