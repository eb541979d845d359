"""
FastAPI middleware for observability.

Correlation ID propagation and per-request access logging.

Dependencies: fastapi, starlette, epub_service.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from epub_service.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with status and timing.

    Polling clients hit the status route every few seconds, so successful
    requests log at INFO and server errors at WARNING.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        fields = {"method": request.method, "path": request.url.path}

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                "%s %s - unhandled %s",
                request.method,
                request.url.path,
                type(e).__name__,
                extra={**fields, "process_time_ms": _elapsed_ms(started)},
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s - %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                **fields,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to the request context and echo it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
