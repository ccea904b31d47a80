"""
Script sync domain service - The push command.

One invocation runs the whole flow to completion:

    active document -> token extraction -> upload -> response check -> status line

Each step can end the run with a SyncError. Whatever happens, exactly one
status line is written and a PushOutcome is returned; errors never reach
the host that triggered the command. There is no retry and no state kept
between invocations.
"""

import logging
from dataclasses import dataclass

from .exceptions import NoActiveDocument, SyncError, UploadRejected
from .extraction import extract_script
from .ports import DocumentSource, PushOutcome, ScriptUploader, StatusDisplay
from .response import is_accepted
from .status import report_status

logger = logging.getLogger(__name__)


@dataclass
class ScriptSyncService:
    """
    Domain service for pushing the active botvs script.

    Composes the host capabilities (documents, status display) with the
    uploader. Holds no state of its own.
    """

    documents: DocumentSource
    uploader: ScriptUploader
    status: StatusDisplay

    def push_active_document(self) -> PushOutcome:
        """
        Push the active document to the botvs endpoint and report the outcome.

        Returns:
            PushOutcome describing success or the reason for failure
        """
        try:
            message = self._push()
        except SyncError as exc:
            logger.warning("Script push failed: %s", exc)
            return self._report(False, str(exc))

        logger.info("Script push accepted")
        return self._report(True, message)

    def _push(self) -> str:
        document = self.documents.get_active_document()
        if document is None:
            raise NoActiveDocument()

        script = extract_script(document.text, document.path)
        logger.debug("Pushing %d characters from %s", len(script.payload), document.path)

        body = self.uploader.push(script.token, script.payload)
        if not is_accepted(body):
            raise UploadRejected(body)
        return f"upload successfully!{body}"

    def _report(self, success: bool, message: str) -> PushOutcome:
        line = report_status(self.status, message)
        return PushOutcome(success=success, message=message, status_line=line)
