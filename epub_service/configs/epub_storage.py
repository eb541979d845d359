"""
EPUB storage bucket configuration.

Settings for the bucket holding finished EPUB artifacts and status records,
the key namespace, and signed download URL lifetime.

Dependencies: pydantic_settings
System role: Object store configuration for artifacts and status records
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "v1.0.0"


class EpubStorageSettings(BaseSettings):
    """Settings for EPUB bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EPUB_STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="epub-storage",
        description="S3 bucket for EPUB artifacts and status records",
    )
    region: str = Field(
        default="ap-northeast-1",
        description="AWS region for the S3 bucket",
    )
    version_tag: str = Field(
        default=APP_VERSION,
        description="Key namespace applied to every artifact and status key",
    )
    signed_url_expiry: int = Field(
        default=3600,
        description="Signed download URL expiry in seconds (default 1 hour)",
    )
