"""
Exception hierarchy for the EPUB status service.

Store failures propagate to the HTTP layer; dispatch failures are logged by
the dispatcher and never leave the detached task. A FAILED generation is a
reported status, not an exception.

Dependencies: None (pure domain layer)
System role: Service error types
"""

from typing import Any


def _merge_context(details: dict[str, Any] | None, **fields: Any) -> dict[str, Any]:
    """Copy details and add the non-empty context fields."""
    merged = dict(details or {})
    merged.update({name: value for name, value in fields.items() if value})
    return merged


class EpubServiceException(Exception):
    """Base exception for all EPUB service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Args:
            message: Human-readable error message
            details: Context for logs (object key, operation, id)
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(EpubServiceException):
    """Id rejected before it reaches the object store."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, field=field))


class StoreUnavailableError(EpubServiceException):
    """
    Object store call failed for a reason other than not-found.

    Aborts the query. `operation` is one of head, get, put, presign.
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, key=key, operation=operation))


class RecordCorruptError(EpubServiceException):
    """Status object exists but is not a JSON object. Never auto-healed."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, key=key))


class DispatchUnavailableError(EpubServiceException):
    """Generation job could not be triggered. Logged, never surfaced."""

    def __init__(
        self,
        message: str,
        epub_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, epub_id=epub_id))
