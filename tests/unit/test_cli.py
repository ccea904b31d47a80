"""
Unit tests for the botvs-sync command line.

The HTTP client factory is patched to use httpx.MockTransport.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from src import cli
from src.adapters.upload.http import create_http_client
from src.config.settings import Settings

runner = CliRunner()


@pytest.fixture
def respond_with(recorded_requests: list[httpx.Request]) -> Callable[..., None]:
    """Patch the CLI's client factory so every request gets the given answer."""
    patches = []

    def _respond(body: str = "", error: Exception | None = None) -> None:
        def handle(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(200, text=body)

        def factory(settings: Settings) -> httpx.Client:
            return create_http_client(settings, transport=httpx.MockTransport(handle))

        p = patch.object(cli, "create_http_client", factory)
        p.start()
        patches.append(p)

    yield _respond

    for p in patches:
        p.stop()


class TestPushCommand:
    """Tests for `botvs-sync push`."""

    def test_success_exit_zero(
        self,
        respond_with: Callable[..., None],
        recorded_requests: list[httpx.Request],
        token: str,
        write_script: Callable[..., Path],
    ) -> None:
        respond_with('{"code":0,"msg":"ok"}')
        path = write_script(f"botvs@{token}\nprint(1)")

        result = runner.invoke(cli.app, ["push", str(path)])

        assert result.exit_code == 0
        assert "[botvs] - upload successfully!" in result.output
        assert len(recorded_requests) == 1

    def test_rejected_exit_one(
        self,
        respond_with: Callable[..., None],
        token: str,
        write_script: Callable[..., Path],
    ) -> None:
        respond_with('{"code":200,"msg":"fail"}')
        path = write_script(f"botvs@{token}\nprint(1)")

        result = runner.invoke(cli.app, ["push", str(path)])

        assert result.exit_code == 1
        assert "upload failed!" in result.output

    def test_invalid_token_no_request(
        self,
        respond_with: Callable[..., None],
        recorded_requests: list[httpx.Request],
        write_script: Callable[..., Path],
    ) -> None:
        respond_with('{"code":0}')
        path = write_script("print(1)")

        result = runner.invoke(cli.app, ["push", str(path)])

        assert result.exit_code == 1
        assert "invalid botvs token!" in result.output
        assert recorded_requests == []

    def test_empty_file(
        self, respond_with: Callable[..., None], write_script: Callable[..., Path]
    ) -> None:
        respond_with('{"code":0}')
        path = write_script("")

        result = runner.invoke(cli.app, ["push", str(path)])

        assert result.exit_code == 1
        assert "invalid empty file!" in result.output

    def test_transport_error_reported(
        self,
        respond_with: Callable[..., None],
        token: str,
        write_script: Callable[..., Path],
    ) -> None:
        """Unreachable host is reported as a status line, not a traceback."""
        respond_with(error=httpx.ConnectError("Name or service not known"))
        path = write_script(f"botvs@{token}\nx")

        result = runner.invoke(cli.app, ["push", str(path)])

        assert result.exit_code == 1
        assert "Name or service not known" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_missing_file(self, respond_with: Callable[..., None], tmp_path: Path) -> None:
        respond_with('{"code":0}')

        result = runner.invoke(cli.app, ["push", str(tmp_path / "missing.js")])

        assert result.exit_code == 1
        assert "unable to read" in result.output


class TestServeCommand:
    """Tests for `botvs-sync serve`."""

    def test_serve_runs_uvicorn(self) -> None:
        with patch.object(cli.uvicorn, "run") as run:
            result = runner.invoke(cli.app, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        run.assert_called_once_with("src.api.main:app", host="127.0.0.1", port=9000)
