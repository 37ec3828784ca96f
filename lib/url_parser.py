"""
Spreadsheet URL parsing.

Extracts the spreadsheet ID from the URL shapes Google hands out.
Pure string processing, no I/O.
"""
from typing import Any

from config import SPREADSHEET_ID_PATTERNS
from lib.errors import InvalidUrlError, MalformedUrlError


def resolve_spreadsheet_id(url: Any) -> str:
    """
    Extract the spreadsheet ID from a Google Sheets URL.

    Patterns are tried in order and the first match wins:
    1. .../spreadsheets/d/<ID>
    2. .../d/<ID>
    3. ...id=<ID>

    Args:
        url: A Google Sheets URL

    Returns:
        The spreadsheet ID

    Raises:
        MalformedUrlError: No pattern matched
        InvalidUrlError: Matching failed (e.g. url is not a string)
    """
    try:
        for pattern in SPREADSHEET_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
    except TypeError as e:
        raise InvalidUrlError() from e

    raise MalformedUrlError()
