"""
EPUB status orchestrator.

Per-request state machine deciding which status to report for an item,
whether a generation job must be (re)dispatched, and how a finished artifact
is delivered.

Invariant (artifact precedence): if the artifact exists the item is
COMPLETED, whatever the status record says. This is checked first and
nothing else is read once it holds.

The orchestrator only ever writes PENDING records. PROCESSING and FAILED are
written by the generation worker; COMPLETED is never stored.

Dependencies: epub_service.core, epub_service.models, epub_service.configs
System role: Status orchestration core
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from epub_service.configs.settings import Settings
from epub_service.core.artifact_store import ArtifactStore
from epub_service.core.job_dispatcher import JobDispatcher
from epub_service.core.status_store import StatusStore
from epub_service.models.epub import EpubStatus, EpubStatusResponse, StatusRecord

logger = logging.getLogger(__name__)

STALE_PENDING_AFTER = timedelta(minutes=5)
DEFAULT_FAILURE_MESSAGE = "EPUB generation failed"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EpubStatusOrchestrator:
    """
    Status orchestrator for EPUB generation.

    Composes artifact access, the status store and the job dispatcher into a
    single `query` decision. Concurrent first-time queries for one id may
    each create a PENDING record and dispatch; duplicate dispatch is accepted.
    """

    def __init__(
        self,
        settings: Settings,
        artifacts: ArtifactStore,
        status_store: StatusStore,
        dispatcher: JobDispatcher,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            settings: Application settings (version tag, signed URL expiry)
            artifacts: Artifact existence check and signed URL issuer
            status_store: Status record accessor
            dispatcher: Generation job dispatcher
            clock: Source of the current timezone-aware instant
        """
        self._version_tag = settings.storage.version_tag
        self._signed_url_ttl = timedelta(seconds=settings.storage.signed_url_expiry)
        self._artifacts = artifacts
        self._status_store = status_store
        self._dispatcher = dispatcher
        self._clock = clock

    @property
    def version_tag(self) -> str:
        return self._version_tag

    async def query(self, epub_id: str) -> EpubStatusResponse:
        """
        Determine the current status of an item, dispatching generation if needed.

        Args:
            epub_id: Work item id

        Returns:
            EpubStatusResponse: Status descriptor (signed URL iff COMPLETED,
                error iff FAILED)

        Raises:
            StoreUnavailableError: If an object store call fails
            RecordCorruptError: If the status record cannot be decoded
        """
        # Artifact precedence
        if await self._artifacts.exists(epub_id):
            signed_url = await self._artifacts.issue_signed_url(epub_id, self._signed_url_ttl)
            return EpubStatusResponse(
                id=epub_id,
                status=EpubStatus.COMPLETED,
                signed_url=signed_url,
            )

        record = await self._status_store.read(epub_id)
        if record is None:
            return await self._start_generation(epub_id)

        status = record.status or EpubStatus.PENDING.value

        if status == EpubStatus.PROCESSING.value:
            return EpubStatusResponse(id=epub_id, status=EpubStatus.PROCESSING)

        if status == EpubStatus.FAILED.value:
            return EpubStatusResponse(
                id=epub_id,
                status=EpubStatus.FAILED,
                error=record.error or DEFAULT_FAILURE_MESSAGE,
            )

        if status == EpubStatus.PENDING.value:
            await self._handle_pending(epub_id, record)
        else:
            logger.warning(
                "Unrecognized status %r for %s, reporting PENDING",
                status,
                epub_id,
                extra={"epub_id": epub_id},
            )

        return EpubStatusResponse(id=epub_id, status=EpubStatus.PENDING)

    async def _start_generation(self, epub_id: str) -> EpubStatusResponse:
        """First request: record PENDING, then trigger the job."""
        await self._status_store.write(epub_id, StatusRecord.pending(self._clock()))
        self._dispatcher.dispatch(epub_id, self._version_tag)
        logger.info("Started EPUB generation for %s", epub_id, extra={"epub_id": epub_id})
        return EpubStatusResponse(id=epub_id, status=EpubStatus.PENDING)

    async def _handle_pending(self, epub_id: str, record: StatusRecord) -> None:
        """Re-dispatch a PENDING record that is missing a timestamp or stale."""
        if record.created_at is None:
            # Legacy records: dispatch without rewriting
            logger.info(
                "PENDING status without createdAt for %s, triggering job",
                epub_id,
                extra={"epub_id": epub_id},
            )
            self._dispatcher.dispatch(epub_id, self._version_tag)
            return

        now = self._clock()
        age = now - record.created_at
        if age <= STALE_PENDING_AFTER:
            return

        logger.info(
            "Stale PENDING status for %s (created %s ago), triggering new job",
            epub_id,
            age,
            extra={"epub_id": epub_id},
        )
        self._dispatcher.dispatch(epub_id, self._version_tag)
        await self._status_store.write(epub_id, StatusRecord.pending(now))
