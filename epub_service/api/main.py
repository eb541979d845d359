"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, epub_service.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import argparse
import logging
import socket
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from epub_service.api.deps.dependencies import ServiceCache
from epub_service.configs import Settings, get_settings
from epub_service.core.exceptions import (
    RecordCorruptError,
    StoreUnavailableError,
    ValidationError,
)
from epub_service.models.common import ErrorResponse
from epub_service.observability.logger import configure_logging
from epub_service.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import epubs_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events. On shutdown, job submissions still
    in flight are given a bounded window to finish.
    """
    cache: ServiceCache = app.state.services
    settings = cache.settings
    configure_logging(settings.effective_log_level)

    # Startup
    logger.info("Pre-warming service cache...")
    _ = cache.orchestrator
    logger.info(
        "Service cache pre-warmed",
        extra={"bucket": settings.storage.bucket, "version_tag": settings.storage.version_tag},
    )

    yield

    # Shutdown
    await cache.runner.drain(timeout=settings.job.shutdown_drain_timeout)
    cache.clear()
    logger.info("Service cache cleared")


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Map input validation errors to 400."""
    body = ErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(status_code=400, content=body.model_dump())


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    """Map object store failures to 503."""
    logger.error("Object store unavailable: %s", exc, extra={"path": request.url.path})
    body = ErrorResponse(error="Storage temporarily unavailable")
    return JSONResponse(status_code=503, content=body.model_dump())


async def record_corrupt_handler(request: Request, exc: RecordCorruptError) -> JSONResponse:
    """Map undecodable status records to 500."""
    logger.error("Corrupt status record: %s", exc, extra={"path": request.url.path})
    body = ErrorResponse(error="Status record could not be read")
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Optional settings (defaults to process-wide settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="EPUB Generation Status API",
        description="Asynchronous EPUB generation with polling-based status delivery",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.services = ServiceCache(settings)

    # Add CORS middleware
    allowed_origins = settings.server.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    # Add observability middleware (correlation outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(RecordCorruptError, record_corrupt_handler)

    # Health at the root for load balancers, everything under /api/v1
    app.include_router(health_router)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(epubs_router, prefix="/api/v1")

    return app


def find_available_port() -> int:
    """Ask the OS for a free TCP port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("localhost", 0))
        return sock.getsockname()[1]


def determine_port(port_flag: int | None, settings: Settings) -> int:
    """
    Resolve the listen port.

    Order: --port flag, PORT/SERVER_PORT setting, then a free port.
    """
    if port_flag:
        return port_flag
    if settings.server.port:
        return settings.server.port
    return find_available_port()


def main() -> None:
    """Run the API under uvicorn."""
    parser = argparse.ArgumentParser(description="EPUB generation status API")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    args = parser.parse_args()

    settings = get_settings()
    port = determine_port(args.port, settings)
    logger.info("Server starting on port %s", port)
    uvicorn.run(
        "epub_service.api.main:app",
        host=settings.server.host,
        port=port,
    )


app = create_app()


if __name__ == "__main__":
    main()
