"""
Sheet utility functions.
"""
import json
from typing import Any


def quote_sheet_title(title: str) -> str:
    """Quote a sheet title for use as an A1 range: Sales Q1 -> 'Sales Q1'."""
    return "'{}'".format(title.replace("'", "''"))


def is_blank(val: Any) -> bool:
    """None and empty string count as blank. 0 and False do not."""
    return val is None or val == ""


def dig(data: Any, *path: str) -> Any:
    """Walk nested dicts, returning None at the first missing key."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def to_json(data: Any) -> str:
    """Indented JSON as shown to the caller."""
    return json.dumps(data, indent=2, ensure_ascii=False)
