"""
Core business logic module.

Contains the status orchestration state machine, its storage and dispatch
collaborators, and the exception hierarchy.
"""

from epub_service.core.exceptions import (
    DispatchUnavailableError,
    EpubServiceException,
    RecordCorruptError,
    StoreUnavailableError,
    ValidationError,
)
from epub_service.core.epub_orchestrator import STALE_PENDING_AFTER, EpubStatusOrchestrator

__all__ = [
    # Exceptions
    "EpubServiceException",
    "ValidationError",
    "StoreUnavailableError",
    "RecordCorruptError",
    "DispatchUnavailableError",
    # Orchestration
    "EpubStatusOrchestrator",
    "STALE_PENDING_AFTER",
]
