"""
Domain models and API schemas.

Exports: EpubStatus, StatusRecord, EpubStatusResponse, ErrorResponse
"""

from .common import ErrorResponse
from .epub import EpubStatus, EpubStatusResponse, StatusRecord

__all__ = ["EpubStatus", "EpubStatusResponse", "ErrorResponse", "StatusRecord"]
