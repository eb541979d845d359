"""
Detached task runner.

Spawns coroutines that the request path never awaits. The runner keeps a
strong reference to every task until it finishes, logs errors that escape a
task, and lets the application drain outstanding work on shutdown.

Dependencies: asyncio
System role: Fire-and-forget execution primitive
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class BackgroundTaskRunner:
    """Owner of detached asyncio tasks."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of tasks not yet finished."""
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str | None = None) -> asyncio.Task:
        """
        Schedule a coroutine as a detached task.

        The caller's response does not depend on the task's outcome.

        Args:
            coro: Coroutine to run
            name: Optional task name for logs

        Returns:
            asyncio.Task: The scheduled task
        """
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning("Background task cancelled", extra={"task_name": task.get_name()})
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Background task failed",
                exc_info=exc,
                extra={"task_name": task.get_name()},
            )

    async def drain(self, timeout: float | None = None) -> None:
        """
        Wait for outstanding tasks to finish.

        Args:
            timeout: Maximum seconds to wait; tasks still running afterwards
                are cancelled
        """
        if not self._tasks:
            return
        tasks = list(self._tasks)
        logger.info("Draining background tasks", extra={"count": len(tasks)})
        _, still_running = await asyncio.wait(tasks, timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            logger.warning(
                "Background tasks cancelled at shutdown",
                extra={"count": len(still_running)},
            )
