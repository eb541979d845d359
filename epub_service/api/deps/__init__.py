"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_epub_orchestrator,
    get_service_cache,
)

__all__ = [
    "get_epub_orchestrator",
    "get_service_cache",
]
