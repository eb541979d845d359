"""
HTTP server configuration.

Port selection and CORS origin settings for the API host.

Dependencies: pydantic, pydantic_settings
System role: Web server configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Uvicorn and CORS configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    port: int | None = Field(
        default=None,
        validation_alias=AliasChoices("SERVER_PORT", "PORT"),
        description="Port to listen on (unset: pick a free port)",
    )
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("SERVER_HOST", "HOST"),
        description="Interface to bind",
    )
    cors_origins: str = Field(
        default="",
        validation_alias=AliasChoices("SERVER_CORS_ORIGINS", "CORS_ORIGINS"),
        description="Comma-separated list of allowed CORS origins ('*' for any)",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """
        Parse cors_origins into a clean origin list.

        Returns:
            list[str]: Trimmed, non-empty origins
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
