"""
API v1 routes.

Defines the local command endpoints editor integrations call to push the
active botvs script and to read the status bar.
"""

from fastapi import APIRouter, Depends

from src.adapters.documents.filesystem import FileDocumentSource
from src.adapters.status.console import ConsoleStatusBar
from src.api.dependencies import get_status_bar, get_uploader
from src.api.models import PushRequest, PushResponse, StatusResponse
from src.domain.ports import ScriptUploader
from src.domain.sync import ScriptSyncService

router = APIRouter(tags=["v1"])


@router.post(
    "/push",
    response_model=PushResponse,
    responses={422: {"description": "Validation error"}},
    summary="Push the active botvs script",
    description="Read the given file, extract its botvs token and upload the rest "
    "to the botvs rsync endpoint. Push failures are reported in the body with "
    "success=false, not as HTTP errors.",
)
def push(
    request_data: PushRequest,
    uploader: ScriptUploader = Depends(get_uploader),
    status_bar: ConsoleStatusBar = Depends(get_status_bar),
) -> PushResponse:
    """
    Push the active script and report the outcome.

    - **path**: File to push (null when no document is open)

    Declared sync so the blocking upload runs in the worker threadpool.
    """
    service = ScriptSyncService(
        documents=FileDocumentSource(request_data.path),
        uploader=uploader,
        status=status_bar,
    )
    outcome = service.push_active_document()
    return PushResponse(
        success=outcome.success,
        message=outcome.message,
        status=outcome.status_line,
    )


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Read the status bar",
    description="Return the last status line written by a push.",
)
async def read_status(
    status_bar: ConsoleStatusBar = Depends(get_status_bar),
) -> StatusResponse:
    """Return the current status line and whether the bar is frozen."""
    return StatusResponse(text=status_bar.text, frozen=status_bar.is_frozen())
