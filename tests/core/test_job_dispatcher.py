"""
Unit tests for JobDispatcher.

Tests fire-and-forget submission, argument overrides and failure isolation.
Dependencies: pytest, pytest-asyncio, botocore, epub_service.core.job_dispatcher
System role: Generation job dispatch validation
"""

import asyncio
import logging
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from epub_service.boundary.aws.batch_client import BatchJobClient
from epub_service.core.background import BackgroundTaskRunner
from epub_service.core.job_dispatcher import JobDispatcher, build_job_args


@pytest.fixture
def batch_client() -> MagicMock:
    client = MagicMock(spec=BatchJobClient)
    client.submit_job.return_value = "job-123"
    return client


@pytest.fixture
def runner() -> BackgroundTaskRunner:
    return BackgroundTaskRunner()


def test_build_job_args():
    assert build_job_args("L1", "v1.0.0") == ["--revision-id", "L1", "--version", "v1.0.0"]


class TestDispatch:
    """Test suite for JobDispatcher.dispatch."""

    @pytest.mark.asyncio
    async def test_dispatch_submits_with_id_and_version(self, batch_client, runner):
        dispatcher = JobDispatcher(batch_client, runner)

        task = dispatcher.dispatch("L1", "v1.0.0")
        result = await task

        assert result == "job-123"
        batch_client.submit_job.assert_called_once_with(
            "L1", ["--revision-id", "L1", "--version", "v1.0.0"]
        )

    @pytest.mark.asyncio
    async def test_dispatch_does_not_wait_for_submission(self, batch_client, runner):
        dispatcher = JobDispatcher(batch_client, runner)

        task = dispatcher.dispatch("L1", "v1.0.0")

        assert isinstance(task, asyncio.Task)
        assert runner.pending == 1
        await runner.drain(timeout=1.0)

    @pytest.mark.asyncio
    async def test_client_error_is_logged_and_isolated(self, batch_client, runner, caplog):
        batch_client.submit_job.side_effect = ClientError(
            {"Error": {"Code": "ClientException", "Message": "queue disabled"}}, "SubmitJob"
        )
        dispatcher = JobDispatcher(batch_client, runner)

        with caplog.at_level(logging.ERROR):
            result = await dispatcher.dispatch("L1", "v1.0.0")

        assert result is None
        assert "Generation job dispatch failed" in caplog.text
        record = next(r for r in caplog.records if r.getMessage() == "Generation job dispatch failed")
        assert record.error_type == "DispatchUnavailableError"
        assert record.epub_id == "L1"

    @pytest.mark.asyncio
    async def test_credential_error_is_isolated(self, batch_client, runner):
        batch_client.submit_job.side_effect = NoCredentialsError()
        dispatcher = JobDispatcher(batch_client, runner)

        assert await dispatcher.submit("L1", "v1.0.0") is None

    @pytest.mark.asyncio
    async def test_unexpected_error_is_isolated(self, batch_client, runner):
        batch_client.submit_job.side_effect = RuntimeError("unexpected")
        dispatcher = JobDispatcher(batch_client, runner)

        assert await dispatcher.submit("L1", "v1.0.0") is None
