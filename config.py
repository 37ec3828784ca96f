"""
Configuration constants for the MCP server.
Centralizes environment variable names, API scopes, URL patterns and
the type inference vocabulary.
"""
import re
from typing import Final

SERVER_NAME: Final[str] = "google-sheets-mcp"

# Environment variables
CREDENTIALS_FILE_ENV: Final[str] = "GOOGLE_CREDENTIALS_JSON_FILE"
CREDENTIALS_JSON_ENV: Final[str] = "GOOGLE_CREDENTIALS_JSON"
LOG_LEVEL_ENV: Final[str] = "LOG_LEVEL"
DEBUG_ENV: Final[str] = "DEBUG"

# Left behind by hosts that failed to interpolate user settings
UNRESOLVED_PLACEHOLDER: Final[str] = "${user_config."

REQUIRED_CREDENTIAL_FIELDS: Final[tuple[str, ...]] = ("client_email", "private_key", "project_id")

SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.file",
]

DRIVE_FILES_URL: Final[str] = "https://www.googleapis.com/drive/v3/files/{file_id}"

# Field masks for spreadsheets.get
METADATA_FIELDS: Final[str] = (
    "spreadsheetId,spreadsheetUrl,properties(title),"
    "sheets(properties(sheetId,title,index,sheetType,gridProperties))"
)
GRID_FIELDS: Final[str] = (
    "sheets(properties(sheetId,title,index,gridProperties),"
    "data(startRow,startColumn,rowData(values("
    "effectiveValue,formattedValue,hyperlink,note,effectiveFormat("
    "backgroundColor,textFormat,horizontalAlignment,verticalAlignment,"
    "textDirection,numberFormat)))))"
)
DRIVE_FILE_FIELDS: Final[str] = (
    "createdTime,modifiedTime,lastModifyingUser(displayName,emailAddress)"
)

# Spreadsheet ID patterns, in priority order. The second is a superset of
# the first and must stay behind it.
SPREADSHEET_ID_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"/spreadsheets/d/([A-Za-z0-9_-]+)"),
    re.compile(r"/d/([A-Za-z0-9_-]+)"),
    re.compile(r"id=([A-Za-z0-9_-]+)"),
)

# Type inference
CURRENCY_SYMBOLS: Final[frozenset[str]] = frozenset("$£€¥₹₽₩")
_NUMERIC_DATE = r"\d{1,2}([/-])\d{1,2}\1(?:\d{4}|\d{2})"
_ISO_DATE = r"\d{4}-\d{2}-\d{2}"
_TIME_SUFFIX = (
    r"(?:[T ]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?"
    r"(?:\s?[AaPp][Mm])?(?:Z|[+-]\d{2}:?\d{2})?)?"
)
# Display strings: a leading D/M/YY[YY] or D-M-YY[YY], anything may follow
NUMERIC_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(rf"^{_NUMERIC_DATE}(?!\d)")
# String values: the whole value is a date, optionally with a time of day
STRING_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?:{_NUMERIC_DATE}|{_ISO_DATE}){_TIME_SUFFIX}"
)

# Optional cell properties copied when formatting is requested.
# (output key, path inside the Sheets API CellData)
FORMAT_PROPERTIES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("note", ("note",)),
    ("backgroundColor", ("effectiveFormat", "backgroundColor")),
    ("textFormat", ("effectiveFormat", "textFormat")),
    ("horizontalAlignment", ("effectiveFormat", "horizontalAlignment")),
    ("verticalAlignment", ("effectiveFormat", "verticalAlignment")),
    ("textDirection", ("effectiveFormat", "textDirection")),
    ("numberFormat", ("effectiveFormat", "numberFormat")),
)
