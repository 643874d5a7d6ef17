"""
DevOps Demo FastAPI application factory.

Captures the boot record, mounts routers, and configures middleware,
logging, and exception handlers.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from devops_demo.api import health, root
from devops_demo.clock import BootRecord, Clock
from devops_demo.config import Settings, get_settings
from devops_demo.middleware import RequestLoggingMiddleware
from devops_demo.models.responses import ErrorResponse

logger = logging.getLogger("devops_demo")
_HANDLER_NAME = "devops_demo.stdout"


def _configure_logging(settings: Settings) -> None:
    """
    Send log records to stdout in a single line format.

    The stdout handler is installed once per process; later calls only
    adjust the level. Handlers installed by others are left alone.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)

    # Access lines come from RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup logic runs before ``yield``, shutdown logic runs after.
    """
    settings: Settings = app.state.settings
    logger.info(
        "%s v%s starting up, booted at %s",
        settings.app_name,
        settings.app_version,
        app.state.boot_record.isoformat,
    )
    yield
    logger.info("%s shutting down", settings.app_name)


def create_app(settings: Settings | None = None, clock: Clock | None = None) -> FastAPI:
    """
    Build and configure the FastAPI application.

    Each call records its own boot time, so independently built
    applications (e.g. one per test) never share a boot record.
    """
    settings = settings or get_settings()
    clock = clock or Clock()
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Demo service exposing service info and a health check.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.clock = clock
    app.state.boot_record = BootRecord.capture(clock)

    # --- Exception Handlers ---
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch unhandled exceptions and return a clean 500 response."""
        logger.exception(
            "Unhandled error | %s %s | %s",
            request.method,
            request.url.path,
            str(exc),
        )
        body = ErrorResponse(
            error="internal_server_error",
            detail="An unexpected error occurred. Please try again later.",
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- Middleware ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Routers ---
    app.include_router(root.router)
    app.include_router(health.router)

    return app

