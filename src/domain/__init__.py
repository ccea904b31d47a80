"""
Domain layer - Pure push logic with zero framework imports.

This package contains the botvs script push flow: token extraction,
response validation and status reporting. It defines its own port
interfaces for the host and the network, ensuring true hexagonal
architecture decoupling.
"""

from .exceptions import (
    DocumentUnavailable,
    EmptyDocument,
    InvalidToken,
    NoActiveDocument,
    SyncError,
    UploadRejected,
    UploadTransportError,
)
from .extraction import TOKEN_PATTERN, ScriptPush, extract_script
from .ports import ActiveDocument, DocumentSource, PushOutcome, ScriptUploader, StatusDisplay
from .response import is_accepted, parse_response_code
from .status import format_status, report_status
from .sync import ScriptSyncService

__all__ = [
    "TOKEN_PATTERN",
    "ActiveDocument",
    "DocumentSource",
    "DocumentUnavailable",
    "EmptyDocument",
    "InvalidToken",
    "NoActiveDocument",
    "PushOutcome",
    "ScriptPush",
    "ScriptSyncService",
    "ScriptUploader",
    "StatusDisplay",
    "SyncError",
    "UploadRejected",
    "UploadTransportError",
    "extract_script",
    "format_status",
    "is_accepted",
    "parse_response_code",
    "report_status",
]
