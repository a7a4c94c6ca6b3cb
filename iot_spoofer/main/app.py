"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, includes
the API routers and serves the dashboard build.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from iot_spoofer.main.config import get_settings
from iot_spoofer.main.container import app_lifespan, init_container
from iot_spoofer.presentation.controllers import (
    devices_router,
    entities_router,
    system_router,
)
from iot_spoofer.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Delegates resource startup and shutdown to the container's
    app_lifespan.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.starting")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    # Initialize dependency injection container
    init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(devices_router)
    app.include_router(entities_router)
    app.include_router(system_router)

    # Mounted last so the API routes take precedence
    frontend_dir = Path(settings.server.frontend_dir)
    if frontend_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=str(frontend_dir), html=True),
            name="frontend",
        )
        logger.info("app.frontend_mounted", path=str(frontend_dir))
    else:
        logger.info("app.frontend_missing", path=str(frontend_dir))

    return app


app = create_app()
