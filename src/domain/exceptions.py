"""
Domain exceptions - Semantic error types for script synchronization.

Every failure of a push is one of these. The service catches them and
renders the message as a single status line; none of them reach the host.
"""


class SyncError(Exception):
    """Base class for script synchronization errors."""

    pass


class NoActiveDocument(SyncError):
    """No document is open in the host."""

    def __init__(self) -> None:
        super().__init__("please open a botvs script file first...")


class DocumentUnavailable(SyncError):
    """The active document exists but could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"unable to read {path}: {reason}")


class EmptyDocument(SyncError):
    """The active document has no content."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"invalid empty file! - {path}")


class InvalidToken(SyncError):
    """No botvs token was found in the document."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"invalid botvs token! - {pattern}")


class UploadTransportError(SyncError):
    """The upload request never produced a response."""

    pass


class UploadRejected(SyncError):
    """The endpoint answered without a success code."""

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(f"upload failed!{body}")
