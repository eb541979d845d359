"""
Generation job dispatcher.

Fire-and-forget trigger for the external EPUB generation job. Submission runs
on a detached task; its failure is logged and never reaches the caller, and
the next poll after the staleness window retries it.

Dependencies: botocore, epub_service.boundary.aws, epub_service.core.background
System role: Batch job dispatch
"""

import asyncio
import logging

from botocore.exceptions import BotoCoreError, ClientError

from epub_service.boundary.aws.batch_client import BatchJobClient
from epub_service.core.background import BackgroundTaskRunner
from epub_service.core.exceptions import DispatchUnavailableError
from epub_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def build_job_args(epub_id: str, version_tag: str) -> list[str]:
    """Container arguments for one generation run."""
    return ["--revision-id", epub_id, "--version", version_tag]


class JobDispatcher:
    """Triggers generation jobs without waiting for them."""

    def __init__(self, batch_client: BatchJobClient, runner: BackgroundTaskRunner) -> None:
        self._batch = batch_client
        self._runner = runner

    def dispatch(self, epub_id: str, version_tag: str) -> asyncio.Task:
        """
        Start a generation job for an id as a detached task.

        Returns immediately; the returned task is only useful to tests and
        shutdown draining.

        Args:
            epub_id: Work item id
            version_tag: Key namespace the worker must write into

        Returns:
            asyncio.Task: The detached submission task
        """
        return self._runner.spawn(
            self.submit(epub_id, version_tag),
            name=f"dispatch:{epub_id}",
        )

    async def submit(self, epub_id: str, version_tag: str) -> str | None:
        """
        Submit the job and log the outcome.

        Never raises: trigger failures are logged as DispatchUnavailableError.

        Returns:
            str | None: Batch job id, or None if submission failed
        """
        try:
            try:
                job_id = await asyncio.to_thread(
                    self._batch.submit_job,
                    epub_id,
                    build_job_args(epub_id, version_tag),
                )
            except (ClientError, BotoCoreError) as e:
                raise DispatchUnavailableError(
                    f"Failed to trigger generation job: {e}", epub_id=epub_id
                ) from e
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger,
                "Generation job dispatch failed",
                e,
                epub_id=epub_id,
                version_tag=version_tag,
            )
            return None

        logger.info(
            "Triggered generation job for %s, job id: %s",
            epub_id,
            job_id,
            extra={"epub_id": epub_id, "job_id": job_id},
        )
        return job_id
