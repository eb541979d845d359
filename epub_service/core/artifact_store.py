"""
Artifact access.

Existence probe and signed download URL issuance for finished EPUBs.

Dependencies: botocore, epub_service.boundary.aws
System role: Artifact existence check and signed URL issuer
"""

import asyncio
from datetime import timedelta

from botocore.exceptions import BotoCoreError, ClientError

from epub_service.boundary.aws.s3_client import S3EpubClient
from epub_service.core.exceptions import StoreUnavailableError
from epub_service.core.object_keys import artifact_key


class ArtifactStore:
    """Read-side access to finished EPUB artifacts."""

    def __init__(self, s3_client: S3EpubClient, version_tag: str) -> None:
        self._s3 = s3_client
        self._version_tag = version_tag

    async def exists(self, epub_id: str) -> bool:
        """
        Probe artifact metadata; content is not read.

        Raises:
            StoreUnavailableError: For any failure other than not-found
        """
        key = artifact_key(self._version_tag, epub_id)
        try:
            return await asyncio.to_thread(self._s3.file_exists, key)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"Failed to check artifact: {e}", key=key, operation="head"
            ) from e

    async def issue_signed_url(self, epub_id: str, ttl: timedelta) -> str:
        """
        Produce a time-limited read URL for the artifact.

        Recomputed on every call; nothing about issued URLs is stored.

        Args:
            epub_id: Work item id
            ttl: URL lifetime

        Returns:
            str: Presigned GET URL

        Raises:
            StoreUnavailableError: If signing fails
        """
        key = artifact_key(self._version_tag, epub_id)
        try:
            return await asyncio.to_thread(
                self._s3.generate_presigned_download_url,
                key,
                int(ttl.total_seconds()),
            )
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"Failed to generate signed URL: {e}", key=key, operation="presign"
            ) from e
