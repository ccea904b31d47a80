"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the uploader and
the status bar into routes. Both are built on objects created during the
app lifespan and stored in app.state.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.status.console import ConsoleStatusBar
from src.adapters.upload.http import HttpScriptUploader
from src.config.settings import Settings, get_settings


def get_http_client(request: Request) -> httpx.Client:
    """
    Get the shared httpx client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_status_bar(request: Request) -> ConsoleStatusBar:
    """Get the process-wide status bar from app state."""
    return request.app.state.status_bar


def get_uploader(
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> HttpScriptUploader:
    """Create uploader with the shared client and configured endpoint."""
    return HttpScriptUploader.from_settings(client, settings)
