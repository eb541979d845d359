"""
Dependency injection container.

Per-application service container and the FastAPI dependencies reading it.
Each app built by `create_app` owns one ServiceCache on `app.state.services`,
so an app built with explicit settings never falls back to process settings.

Dependencies: epub_service.configs, epub_service.core, epub_service.boundary
System role: DI container for service injection
"""

from fastapi import Request

from epub_service.boundary.aws.batch_client import BatchJobClient
from epub_service.boundary.aws.s3_client import S3EpubClient
from epub_service.configs import Settings, get_settings
from epub_service.core.artifact_store import ArtifactStore
from epub_service.core.background import BackgroundTaskRunner
from epub_service.core.epub_orchestrator import EpubStatusOrchestrator
from epub_service.core.job_dispatcher import JobDispatcher
from epub_service.core.status_store import StatusStore


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._s3_client = None
        self._batch_client = None
        self._runner = None
        self._orchestrator = None

    @property
    def settings(self) -> Settings:
        """Get settings (process-wide settings unless injected)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def s3_client(self) -> S3EpubClient:
        """Get cached S3 EPUB bucket client."""
        if self._s3_client is None:
            storage = self.settings.storage
            self._s3_client = S3EpubClient(bucket=storage.bucket, region=storage.region)
        return self._s3_client

    @property
    def batch_client(self) -> BatchJobClient:
        """Get cached Batch client."""
        if self._batch_client is None:
            job = self.settings.job
            self._batch_client = BatchJobClient(
                job_queue=job.job_queue,
                job_definition=job.job_definition,
                region=job.region,
            )
        return self._batch_client

    @property
    def runner(self) -> BackgroundTaskRunner:
        """Get the detached task runner."""
        if self._runner is None:
            self._runner = BackgroundTaskRunner()
        return self._runner

    @property
    def orchestrator(self) -> EpubStatusOrchestrator:
        """Get cached status orchestrator."""
        if self._orchestrator is None:
            version_tag = self.settings.storage.version_tag
            self._orchestrator = EpubStatusOrchestrator(
                settings=self.settings,
                artifacts=ArtifactStore(self.s3_client, version_tag),
                status_store=StatusStore(self.s3_client, version_tag),
                dispatcher=JobDispatcher(self.batch_client, self.runner),
            )
        return self._orchestrator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._batch_client = None
        self._runner = None
        self._orchestrator = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache of the application handling the request."""
    return request.app.state.services


def get_epub_orchestrator(request: Request) -> EpubStatusOrchestrator:
    """
    Get EPUB status orchestrator.

    Returns:
        EpubStatusOrchestrator: Orchestrator wired to S3 and Batch clients
    """
    return get_service_cache(request).orchestrator
