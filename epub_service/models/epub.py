"""
EPUB status domain models and schemas.

Stored status record shape and the status descriptor returned to pollers.

Dependencies: pydantic
System role: EPUB status contracts (storage and API)
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EpubStatus(str, Enum):
    """Caller-visible generation states. COMPLETED is never persisted."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class StatusRecord(BaseModel):
    """
    Per-item status object stored at `{version}/{id}.status`.

    Older records may lack any field; `status` and `created_at` are kept as
    tolerant as possible so a partial record never fails to decode.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str | None = Field(default=None, description="PENDING, PROCESSING or FAILED")
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
        description="Instant of the most recent dispatch",
    )
    error: str | None = Field(default=None, description="Worker error message (FAILED only)")

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> str | None:
        if isinstance(value, str):
            return value
        return None

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, value: object) -> datetime | None:
        # Unparsable timestamps read as missing: the record is then stale.
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, str) and value:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
        else:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @field_validator("error", mode="before")
    @classmethod
    def _coerce_error(cls, value: object) -> str | None:
        if isinstance(value, str) and value:
            return value
        return None

    @classmethod
    def pending(cls, created_at: datetime) -> "StatusRecord":
        """Build a fresh PENDING record stamped with created_at."""
        return cls(status=EpubStatus.PENDING.value, created_at=created_at)

    def to_json(self) -> bytes:
        """Serialize with wire field names, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class EpubStatusResponse(BaseModel):
    """
    Status descriptor returned by the orchestrator.

    `signed_url` is present iff status is COMPLETED; `error` iff FAILED.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "129AC0000000089_20230401_505AC0000000053",
                "status": "COMPLETED",
                "signedUrl": "https://epub-storage.s3.amazonaws.com/v1.0.0/...",
            }
        },
    )

    id: str
    status: EpubStatus
    signed_url: str | None = Field(default=None, alias="signedUrl")
    error: str | None = None
