"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from orchestrator.main.config import AppSettings, get_settings
from orchestrator.main.container import init_container
from orchestrator.presentation.controllers import (
    pipeline_router,
    run_request_validation_handler,
    system_router,
)
from orchestrator.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
    utc_now,
)

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

logger = get_logger(__name__)


def _build_lifespan(settings: AppSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Record the start time used for uptime and log the active wiring."""
        app.state.started_at = utc_now()
        logger.info(
            "orchestrator.started",
            port=settings.server.port,
            acquire_url=settings.upstreams.acquire_url,
            predict_url=settings.upstreams.predict_url,
        )
        yield
        logger.info("orchestrator.stopped")

    return lifespan


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    # Initialize dependency injection container
    container = init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=_build_lifespan(settings),
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(pipeline_router)
    app.add_exception_handler(RequestValidationError, run_request_validation_handler)

    return app


app = create_app()
