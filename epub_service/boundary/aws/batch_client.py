"""
AWS Batch client for EPUB generation jobs.

Submits executions of a predefined job definition with per-item container
command overrides. Submitted jobs are never polled.

Dependencies: boto3
System role: Batch execution trigger
"""

import logging
import re

import boto3

logger = logging.getLogger(__name__)

MAX_JOB_NAME_LENGTH = 128
_JOB_NAME_INVALID = re.compile(r"[^A-Za-z0-9_-]")


def build_job_name(job_definition: str, epub_id: str) -> str:
    """
    Derive a Batch-safe job name from the definition and item id.

    Batch job names allow letters, digits, hyphens and underscores only,
    up to 128 characters.

    Args:
        job_definition: Job definition name or ARN
        epub_id: Work item id

    Returns:
        str: Sanitized job name
    """
    base = job_definition.rsplit("/", 1)[-1].split(":", 1)[0]
    name = _JOB_NAME_INVALID.sub("-", f"{base}-{epub_id}")
    return name[:MAX_JOB_NAME_LENGTH]


class BatchJobClient:
    """AWS Batch client for one job definition and queue."""

    def __init__(
        self,
        job_queue: str,
        job_definition: str,
        region: str = "ap-northeast-1",
        batch_client=None,
    ) -> None:
        """
        Initialize Batch client.

        Args:
            job_queue: Batch job queue name or ARN
            job_definition: Batch job definition name or ARN
            region: AWS region for the job
            batch_client: Optional preconfigured boto3 Batch client
        """
        self._job_queue = job_queue
        self._job_definition = job_definition
        self._batch_client = batch_client or boto3.client("batch", region_name=region)

    def submit_job(self, epub_id: str, args: list[str]) -> str:
        """
        Submit one job execution with overridden container arguments.

        Args:
            epub_id: Work item id (used for the job name)
            args: Container command override

        Returns:
            str: Batch job id of the submitted execution

        Raises:
            ClientError: If the submission is rejected
            BotoCoreError: On transport or credential failures
        """
        job_name = build_job_name(self._job_definition, epub_id)
        response = self._batch_client.submit_job(
            jobName=job_name,
            jobQueue=self._job_queue,
            jobDefinition=self._job_definition,
            containerOverrides={"command": args},
        )
        logger.debug(
            "Batch job submitted",
            extra={"job_name": job_name, "job_id": response.get("jobId")},
        )
        return response["jobId"]
