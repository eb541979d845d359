"""
Base configuration settings.

Shared `.env` loading and the process-wide logging switches inherited by
the aggregate Settings.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings: env file and log verbosity."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging (store writes, Batch submissions)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level when debug is off",
    )

    @property
    def effective_log_level(self) -> str:
        """Log level to configure: DEBUG when debug is set, else log_level."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()
