"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from epub_service.configs.base import BaseSettings
from epub_service.configs.epub_storage import EpubStorageSettings
from epub_service.configs.generation_job import GenerationJobSettings
from epub_service.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    storage: EpubStorageSettings = Field(default_factory=EpubStorageSettings)
    job: GenerationJobSettings = Field(default_factory=GenerationJobSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from epub_service.configs import get_settings
        settings = get_settings()
    """
    return Settings()
