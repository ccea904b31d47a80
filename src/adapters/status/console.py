"""
Console status bar adapter - Implements StatusDisplay protocol.

This module provides an in-process, single-line status display. The
latest line is kept in memory for hosts to query and is logged so it
shows up in the process output.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleStatusBar:
    """
    Implements StatusDisplay protocol via an in-memory line and logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    While frozen, set_text() leaves the displayed line unchanged.
    """

    def __init__(self) -> None:
        self._text = ""
        self._frozen = False

    @property
    def text(self) -> str:
        """The line currently displayed."""
        return self._text

    def is_frozen(self) -> bool:
        """Return True while writes are being dropped."""
        return self._frozen

    def freeze_output(self, frozen: bool) -> None:
        """Freeze or unfreeze the bar."""
        self._frozen = frozen

    def set_text(self, text: str) -> None:
        """
        Replace the displayed line.

        The line is logged at INFO level. Writes to a frozen bar are dropped.

        Args:
            text: Full status line, already timestamped
        """
        if self._frozen:
            logger.debug("Status bar frozen, dropped: %s", text)
            return
        self._text = text
        logger.info("%s", text)
