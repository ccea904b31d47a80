"""
Response validation for the botvs rsync endpoint.

The endpoint answers with a JSON-like body carrying ``"code":<n>``. A code
below 100 means the script was accepted.
"""

import re

CODE_PATTERN = re.compile(r'"code":(\d{0,3})')
SUCCESS_CODE_LIMIT = 100


def parse_response_code(body: str) -> int | None:
    """Return the first status code in body, or None if absent or empty."""
    match = CODE_PATTERN.search(body)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def is_accepted(body: str) -> bool:
    """Return True if body reports a code below 100."""
    code = parse_response_code(body)
    return code is not None and code < SUCCESS_CODE_LIMIT
