"""
Test suite for dependency injection container.

Tests ServiceCache wiring of clients and the orchestrator from settings,
and that each application owns a cache built from its own settings.

System role: Verification of DI container
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from epub_service.api.deps.dependencies import ServiceCache
from epub_service.api.main import create_app
from epub_service.configs.epub_storage import EpubStorageSettings
from epub_service.configs.settings import Settings
from epub_service.core.background import BackgroundTaskRunner
from epub_service.core.epub_orchestrator import EpubStatusOrchestrator

from tests.fakes import InMemoryS3Client


@pytest.fixture
def cache(settings) -> ServiceCache:
    return ServiceCache(settings=settings)


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_s3_client_uses_storage_settings(self, cache):
        with patch("epub_service.api.deps.dependencies.S3EpubClient") as mock_s3:
            client = cache.s3_client

        mock_s3.assert_called_once_with(bucket="test-bucket", region="ap-northeast-1")
        assert client is mock_s3.return_value

    def test_batch_client_uses_job_settings(self, cache):
        with patch("epub_service.api.deps.dependencies.BatchJobClient") as mock_batch:
            _ = cache.batch_client

        mock_batch.assert_called_once_with(
            job_queue="test-queue",
            job_definition="epub-generator",
            region="ap-northeast-1",
        )

    def test_orchestrator_is_cached(self, cache):
        with patch("epub_service.api.deps.dependencies.S3EpubClient"), patch(
            "epub_service.api.deps.dependencies.BatchJobClient"
        ):
            first = cache.orchestrator
            second = cache.orchestrator

        assert isinstance(first, EpubStatusOrchestrator)
        assert first is second
        assert first.version_tag == "v1.0.0"

    def test_runner_is_shared(self, cache):
        assert isinstance(cache.runner, BackgroundTaskRunner)
        assert cache.runner is cache.runner

    def test_clear_drops_instances(self, cache):
        runner = cache.runner
        cache.clear()

        assert cache.runner is not runner



class TestAppServices:
    """Settings passed to create_app reach the orchestrator."""

    @pytest.fixture
    def custom_settings(self, settings) -> Settings:
        return settings.model_copy(
            update={
                "storage": EpubStorageSettings(
                    bucket="custom-bucket",
                    region="eu-west-1",
                    version_tag="v9.9.9",
                )
            }
        )

    def test_app_owns_cache_built_from_settings(self, custom_settings):
        app = create_app(custom_settings)

        assert isinstance(app.state.services, ServiceCache)
        assert app.state.services.settings is custom_settings

    def test_apps_do_not_share_caches(self, settings, custom_settings):
        assert create_app(settings).state.services is not create_app(custom_settings).state.services

    def test_request_uses_app_storage_settings(self, custom_settings):
        s3_store = InMemoryS3Client()
        s3_store.objects["v9.9.9/X1.epub"] = b"PK\x03\x04epub"

        with patch(
            "epub_service.api.deps.dependencies.S3EpubClient", return_value=s3_store
        ) as mock_s3, patch("epub_service.api.deps.dependencies.BatchJobClient"):
            with TestClient(create_app(custom_settings)) as client:
                response = client.get("/api/v1/epubs/X1")

        mock_s3.assert_called_once_with(bucket="custom-bucket", region="eu-west-1")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "COMPLETED"
        assert "v9.9.9/X1.epub" in body["signedUrl"]

    def test_shutdown_clears_app_cache(self, settings):
        app = create_app(settings)

        with patch("epub_service.api.deps.dependencies.S3EpubClient"), patch(
            "epub_service.api.deps.dependencies.BatchJobClient"
        ):
            with TestClient(app):
                assert app.state.services._orchestrator is not None

        assert app.state.services._orchestrator is None
