"""
Filesystem document adapter - Implements DocumentSource protocol.

The "active document" is a single file path chosen by the host. A path of
None means no document is open.
"""

import logging
from pathlib import Path

from src.domain.exceptions import DocumentUnavailable
from src.domain.ports import ActiveDocument

logger = logging.getLogger(__name__)


class FileDocumentSource:
    """
    Implements DocumentSource protocol by reading a file from disk.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The file is read fresh on every call; nothing is cached.
    """

    def __init__(self, path: str | Path | None) -> None:
        """
        Initialize the source with the active document path.

        Args:
            path: File to treat as the active document, or None
        """
        self._path = Path(path) if path is not None else None

    def get_active_document(self) -> ActiveDocument | None:
        """
        Read the active document as UTF-8 text.

        A leading UTF-8 byte order mark is dropped.

        Returns:
            ActiveDocument with the full path and text, or None if no path is set

        Raises:
            DocumentUnavailable: If the path is invalid or the file cannot be read or decoded
        """
        if self._path is None:
            return None

        full_path = str(self._path)
        try:
            full_path = str(self._path.resolve())
            text = self._path.read_text(encoding="utf-8-sig")
        except (OSError, ValueError) as exc:
            logger.debug("Failed to read %s", full_path, exc_info=True)
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            raise DocumentUnavailable(full_path, reason) from exc

        return ActiveDocument(path=full_path, text=text)
