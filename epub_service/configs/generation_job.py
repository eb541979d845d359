"""
Generation job configuration.

Identifies the AWS Batch job definition and queue that produce EPUB artifacts.

Dependencies: pydantic, pydantic_settings
System role: Batch job trigger configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationJobSettings(BaseSettings):
    """AWS Batch job configuration for EPUB generation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EPUB_JOB_",
        case_sensitive=False,
        extra="ignore",
    )

    job_definition: str = Field(
        default="epub-generator",
        description="Batch job definition name or ARN",
    )
    job_queue: str = Field(
        default="epub-generator-queue",
        description="Batch job queue name or ARN",
    )
    region: str = Field(
        default="ap-northeast-1",
        description="AWS region where the job runs",
    )
    shutdown_drain_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for in-flight job submissions on shutdown",
    )
