"""
Shared test fixtures and configuration for entire test suite.

Provides: Settings, in-memory object store, dispatcher mocks, fixed clock
Dependencies: pytest, epub_service
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest

from epub_service.configs.epub_storage import EpubStorageSettings
from epub_service.configs.generation_job import GenerationJobSettings
from epub_service.configs.server import ServerSettings
from epub_service.configs.settings import Settings
from epub_service.core.artifact_store import ArtifactStore
from epub_service.core.epub_orchestrator import EpubStatusOrchestrator
from epub_service.core.job_dispatcher import JobDispatcher
from epub_service.core.status_store import StatusStore

from tests.fakes import NOW, VERSION_TAG, InMemoryS3Client


@pytest.fixture
def settings() -> Settings:
    """Settings with deterministic test values."""
    return Settings(
        storage=EpubStorageSettings(
            bucket="test-bucket",
            region="ap-northeast-1",
            version_tag=VERSION_TAG,
            signed_url_expiry=3600,
        ),
        job=GenerationJobSettings(
            job_queue="test-queue",
            job_definition="epub-generator",
            region="ap-northeast-1",
        ),
        server=ServerSettings(cors_origins="https://example.com"),
    )


@pytest.fixture
def s3_store() -> InMemoryS3Client:
    """Empty in-memory object store."""
    return InMemoryS3Client()


@pytest.fixture
def mock_dispatcher() -> MagicMock:
    """JobDispatcher mock recording dispatch calls."""
    return MagicMock(spec=JobDispatcher)


@pytest.fixture
def clock() -> MagicMock:
    """Clock returning a fixed instant (override return_value to move time)."""
    return MagicMock(return_value=NOW)


@pytest.fixture
def orchestrator(settings, s3_store, mock_dispatcher, clock) -> EpubStatusOrchestrator:
    """Orchestrator wired to the in-memory store and mocked dispatcher."""
    return EpubStatusOrchestrator(
        settings=settings,
        artifacts=ArtifactStore(s3_store, VERSION_TAG),
        status_store=StatusStore(s3_store, VERSION_TAG),
        dispatcher=mock_dispatcher,
        clock=clock,
    )
