"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance that editor
integrations call to trigger a script push, and manages the shared
HTTP client and status bar through lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.status.console import ConsoleStatusBar
from src.adapters.upload.http import create_http_client
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "botvs script sync API v1 - Push scripts and read the status bar",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared httpx client and status bar on startup
    - Closes the httpx client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Pushing scripts to %s", settings.endpoint_url)

    # Store shared objects in app state for dependency injection
    app.state.http_client = create_http_client(settings)
    app.state.status_bar = ConsoleStatusBar()

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    app.state.http_client.close()
    logger.info("HTTP client closed")


app = FastAPI(
    title="botvs-sync",
    description="botvs script sync - Push the active script to botvs from any editor",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
