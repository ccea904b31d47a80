"""
Command-line interface for botvs-sync.

Lets any editor push the active script through an "external tool" entry
(``botvs-sync push $FilePath$``), or run the local command endpoint that
editor integrations call.
"""

import logging
from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape

from src.adapters.documents.filesystem import FileDocumentSource
from src.adapters.status.console import ConsoleStatusBar
from src.adapters.upload.http import HttpScriptUploader, create_http_client
from src.config.settings import get_settings
from src.domain.sync import ScriptSyncService

app = typer.Typer(
    name="botvs-sync",
    help="Push botvs scripts to the botvs rsync endpoint",
    add_completion=False,
)
console = Console()


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def push(
    path: Path = typer.Argument(..., help="Path of the botvs script to push"),
) -> None:
    """Push a botvs script and print the status line."""
    _configure_logging()
    settings = get_settings()

    with create_http_client(settings) as client:
        service = ScriptSyncService(
            documents=FileDocumentSource(path),
            uploader=HttpScriptUploader.from_settings(client, settings),
            status=ConsoleStatusBar(),
        )
        outcome = service.push_active_document()

    if outcome.success:
        console.print(
            f"[green]✓[/green] {escape(outcome.status_line)}", highlight=False, soft_wrap=True
        )
        return

    console.print(f"[red]✗[/red] {escape(outcome.status_line)}", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8765, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the local push endpoint for editor integrations."""
    _configure_logging()
    uvicorn.run("src.api.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
