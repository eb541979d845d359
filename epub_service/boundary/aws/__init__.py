"""
AWS boundary modules.

Exports: S3EpubClient, BatchJobClient
"""

from .batch_client import BatchJobClient
from .s3_client import S3EpubClient

__all__ = ["BatchJobClient", "S3EpubClient"]
