"""
Standardized error handling for the MCP server.
Provides consistent error codes and the exception hierarchy raised by handlers.
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes used across the MCP server."""
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    MALFORMED_URL = "MALFORMED_URL"
    INVALID_URL = "INVALID_URL"
    WORKSHEET_NOT_FOUND = "WORKSHEET_NOT_FOUND"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SheetsMcpError(Exception):
    """Base class for errors that are reported to the caller as tool errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(SheetsMcpError):
    """Credentials are missing, unreadable or incomplete."""
    code = ErrorCode.CONFIGURATION_ERROR


class InputError(SheetsMcpError):
    """The caller supplied something we cannot act on."""


class MalformedUrlError(InputError):
    """No known spreadsheet ID pattern matched the URL."""
    code = ErrorCode.MALFORMED_URL

    def __init__(
        self,
        message: str = "Could not extract sheet ID from URL. Please provide a valid Google Sheets URL.",
    ) -> None:
        super().__init__(message)


class InvalidUrlError(InputError):
    """Matching the URL failed unexpectedly (e.g. the input is not a string)."""
    code = ErrorCode.INVALID_URL

    def __init__(
        self,
        message: str = "Invalid Google Sheets URL format. Please provide a valid Google Sheets URL.",
    ) -> None:
        super().__init__(message)


class WorksheetNotFoundError(InputError):
    """No worksheet carries the requested title."""
    code = ErrorCode.WORKSHEET_NOT_FOUND

    def __init__(self, sheet_name: str) -> None:
        super().__init__(
            f"Sheet '{sheet_name}' not found. Please check the sheet name and try again."
        )
        self.sheet_name = sheet_name


class UpstreamError(SheetsMcpError):
    """Generic replacement for a Google API failure. The cause is logged, not shown."""
    code = ErrorCode.UPSTREAM_ERROR


class SummaryRetrievalError(UpstreamError):
    def __init__(
        self,
        message: str = "Failed to retrieve spreadsheet summary. Please check the URL and your permissions.",
    ) -> None:
        super().__init__(message)


class SheetDataRetrievalError(UpstreamError):
    def __init__(
        self,
        message: str = "Failed to retrieve sheet data. Please check the sheet name and your permissions.",
    ) -> None:
        super().__init__(message)
