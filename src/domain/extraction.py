"""
Token extraction - Splits a botvs script into token and payload.

A botvs script carries its credential inline as ``botvs@<token>`` where the
token is exactly 32 ASCII letters or digits. Everything after the first
such marker, trimmed, is the payload sent to the endpoint.
"""

import re
from dataclasses import dataclass

from .exceptions import EmptyDocument, InvalidToken

TOKEN_PATTERN = re.compile(r"botvs@([a-zA-Z0-9]{32})")


@dataclass(frozen=True)
class ScriptPush:
    """Token and payload extracted from one script."""

    token: str
    payload: str


def extract_script(text: str | None, path: str = "") -> ScriptPush:
    """
    Extract the botvs token and the payload that follows it.

    Args:
        text: Full document text (may be empty or None)
        path: Document path, used in the empty-file message

    Returns:
        ScriptPush with the captured token and trimmed payload

    Raises:
        EmptyDocument: If text is empty or None
        InvalidToken: If no token marker is present
    """
    if not text:
        raise EmptyDocument(path)

    match = TOKEN_PATTERN.search(text)
    if match is None:
        raise InvalidToken(TOKEN_PATTERN.pattern)

    return ScriptPush(token=match.group(1), payload=text[match.end() :].strip())
