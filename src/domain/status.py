"""Status line formatting and reporting."""

from datetime import datetime

from .ports import StatusDisplay

STATUS_TAG = "botvs"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_status(message: str, now: datetime | None = None) -> str:
    """Prefix message with the local timestamp and the botvs tag."""
    if now is None:
        now = datetime.now()
    return f"[{now.strftime(TIMESTAMP_FORMAT)}][{STATUS_TAG}] - {message}"


def report_status(display: StatusDisplay, message: str, now: datetime | None = None) -> str:
    """
    Write a timestamped status line to the display.

    A frozen display is unfrozen first so the line becomes visible.

    Returns:
        The status line as written
    """
    if display.is_frozen():
        display.freeze_output(False)

    line = format_status(message, now)
    display.set_text(line)
    return line
