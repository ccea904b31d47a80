"""
Port interfaces - Protocol definitions for host and network abstraction.

This module defines the capabilities the push operation requires from its
host (active document, status display) and from the network (uploader).
Adapters implement these protocols structurally.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ActiveDocument:
    """The document currently open in the host."""

    path: str
    text: str | None


@dataclass(frozen=True)
class PushOutcome:
    """
    Result of one push invocation.

    Attributes:
        success: True only when the endpoint answered with a code below 100
        message: Human-readable outcome (without timestamp prefix)
        status_line: Exact text written to the status display
    """

    success: bool
    message: str
    status_line: str


class DocumentSource(Protocol):
    """Port interface for reading the active document."""

    def get_active_document(self) -> ActiveDocument | None:
        """
        Return the active document, or None when nothing is open.

        Raises:
            DocumentUnavailable: If the document exists but cannot be read
        """
        ...


class ScriptUploader(Protocol):
    """Port interface for the botvs rsync endpoint."""

    def push(self, token: str, payload: str) -> str:
        """
        Upload a script payload authorized by token.

        Args:
            token: 32-character botvs token
            payload: Script content (already trimmed)

        Returns:
            Full response body as text

        Raises:
            UploadTransportError: If no response was received
        """
        ...


class StatusDisplay(Protocol):
    """Port interface for a single-line status indicator."""

    def is_frozen(self) -> bool:
        """Return True if the display is not accepting updates."""
        ...

    def freeze_output(self, frozen: bool) -> None:
        """Freeze or unfreeze the display."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the displayed text."""
        ...
