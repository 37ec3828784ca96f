"""
Utility libraries for the MCP server.
Pure functions and types: no API calls, no logging.
"""
from .errors import (
    ErrorCode,
    SheetsMcpError,
    ConfigurationError,
    InputError,
    MalformedUrlError,
    InvalidUrlError,
    WorksheetNotFoundError,
    UpstreamError,
    SummaryRetrievalError,
    SheetDataRetrievalError,
)
from .sheet_utils import is_blank
from .type_inference import infer_type
from .types import (
    ValueKind,
    InferredType,
    RawValue,
    CellRecord,
    WorksheetDescriptor,
    SpreadsheetSummary,
    SheetDataResponse,
)
from .url_parser import resolve_spreadsheet_id

__all__ = [
    # Errors
    "ErrorCode",
    "SheetsMcpError",
    "ConfigurationError",
    "InputError",
    "MalformedUrlError",
    "InvalidUrlError",
    "WorksheetNotFoundError",
    "UpstreamError",
    "SummaryRetrievalError",
    "SheetDataRetrievalError",
    # Types
    "ValueKind",
    "InferredType",
    "RawValue",
    "CellRecord",
    "WorksheetDescriptor",
    "SpreadsheetSummary",
    "SheetDataResponse",
    # Functions
    "is_blank",
    "infer_type",
    "resolve_spreadsheet_id",
]
