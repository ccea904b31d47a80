"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid 32-character botvs token
- Script files on disk
- httpx clients backed by a mock transport
"""

from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from src.config.settings import get_settings

VALID_TOKEN = "abcdefghij0123456789ABCDEFGHIJKL"


@pytest.fixture
def token() -> str:
    """A token matching botvs@([a-zA-Z0-9]{32})."""
    return VALID_TOKEN


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing text to a script file under tmp_path."""

    def _write(text: str, name: str = "script.js") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(
    recorded_requests: list[httpx.Request],
) -> Generator[Callable[..., httpx.Client], None, None]:
    """
    Factory for httpx clients answering every request from a handler.

    Pass either a response body (status 200) or a handler callable.
    """
    clients: list[httpx.Client] = []

    def _make(body: str | None = None, handler: Callable | None = None) -> httpx.Client:
        def _handle(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(200, text=body or "")

        client = httpx.Client(transport=httpx.MockTransport(_handle))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
