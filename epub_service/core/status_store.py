"""
Status store accessor.

Reads and writes the per-item status record in the object store. Writes are
full overwrites with no conditional semantics; nothing is cached.

Dependencies: botocore, epub_service.boundary.aws, epub_service.models
System role: Status record persistence
"""

import asyncio
import json
import logging

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from epub_service.boundary.aws.s3_client import S3EpubClient
from epub_service.core.exceptions import RecordCorruptError, StoreUnavailableError
from epub_service.core.object_keys import status_key
from epub_service.models.epub import StatusRecord

logger = logging.getLogger(__name__)

STATUS_CONTENT_TYPE = "application/json"


class StatusStore:
    """Status record accessor for one key namespace."""

    def __init__(self, s3_client: S3EpubClient, version_tag: str) -> None:
        self._s3 = s3_client
        self._version_tag = version_tag

    async def read(self, epub_id: str) -> StatusRecord | None:
        """
        Read the status record for an id.

        Args:
            epub_id: Work item id

        Returns:
            StatusRecord | None: Decoded record, or None if no record exists

        Raises:
            StoreUnavailableError: If the object store read fails
            RecordCorruptError: If the stored content is not a JSON object
        """
        key = status_key(self._version_tag, epub_id)
        try:
            raw = await asyncio.to_thread(self._s3.get_object_bytes, key)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"Failed to read status record: {e}", key=key, operation="get"
            ) from e

        if raw is None:
            return None

        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise RecordCorruptError(f"Status record is not valid JSON: {e}", key=key) from e
        if not isinstance(payload, dict):
            raise RecordCorruptError("Status record is not a JSON object", key=key)

        try:
            return StatusRecord.model_validate(payload)
        except PydanticValidationError as e:
            raise RecordCorruptError(f"Status record has unexpected shape: {e}", key=key) from e

    async def write(self, epub_id: str, record: StatusRecord) -> None:
        """
        Overwrite the status record for an id.

        Args:
            epub_id: Work item id
            record: Complete record to store

        Raises:
            StoreUnavailableError: If the object store write fails
        """
        key = status_key(self._version_tag, epub_id)
        try:
            await asyncio.to_thread(
                self._s3.put_object_bytes,
                key,
                record.to_json(),
                STATUS_CONTENT_TYPE,
            )
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"Failed to write status record: {e}", key=key, operation="put"
            ) from e

        logger.debug("Status record written", extra={"s3_key": key, "status": record.status})
