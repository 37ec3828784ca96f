"""
Base handler class for spreadsheet read operations.

Provides common functionality for all handlers:
- Spreadsheet ID resolution from URLs
- Metadata loading and worksheet descriptors
- Best-effort Drive file times
- Replacing upstream failures with a generic, caller-safe error
"""
import logging
from abc import ABC
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from lib.errors import SheetsMcpError, UpstreamError
from lib.types import FileTimes, WorksheetDescriptor
from lib.url_parser import resolve_spreadsheet_id
from sheets_client import SheetsClient

T = TypeVar("T")

SPREADSHEET_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{id}/edit"

EMPTY_FILE_TIMES: FileTimes = {
    "createdTime": None,
    "modifiedTime": None,
    "lastModifyingUser": None,
}


class BaseHandler(ABC):
    """
    Abstract base class for all spreadsheet handlers.

    Subclasses must define:
    - OP_NAME: Operation name used in log lines
    - UPSTREAM_ERROR: UpstreamError subclass raised for Google API failures
    """

    OP_NAME: ClassVar[str] = ""
    UPSTREAM_ERROR: ClassVar[type[UpstreamError]] = UpstreamError

    def __init__(self, sheets: SheetsClient) -> None:
        """
        Initialize handler with sheets client.

        Args:
            sheets: SheetsClient instance (or a test double with the same methods)
        """
        self.sheets = sheets
        self.logger = logging.getLogger(f"sheets_mcp.{self.OP_NAME or 'handler'}")

    # === Error Handling ===

    def run_guarded(self, fn: Callable[..., T], *args: Any) -> T:
        """
        Run fn, letting our own errors through and replacing anything else.

        Input and configuration errors keep their specific messages. Other
        failures are logged with traceback and replaced by UPSTREAM_ERROR.
        """
        try:
            return fn(*args)
        except SheetsMcpError:
            raise
        except Exception as e:
            self.logger.exception("Error in %s: %s", self.OP_NAME, e)
            raise self.UPSTREAM_ERROR() from e

    # === Loading ===

    @staticmethod
    def resolve(url: Any) -> str:
        return resolve_spreadsheet_id(url)

    def load_metadata(self, spreadsheet_id: str) -> dict[str, Any]:
        metadata = self.sheets.fetch_metadata(spreadsheet_id)
        self.logger.info("Spreadsheet loaded with %d sheets", len(metadata.get("sheets") or []))
        return metadata

    def load_file_times(self, spreadsheet_id: str) -> FileTimes:
        """
        Drive file times. Best effort: the drive.file scope may not cover
        files this service account never opened through Drive.
        """
        try:
            return self.sheets.fetch_file_times(spreadsheet_id)
        except Exception as e:
            self.logger.warning("Drive metadata unavailable for spreadsheet: %s", e)
            return dict(EMPTY_FILE_TIMES)  # type: ignore[return-value]

    # === Metadata Helpers ===

    @staticmethod
    def spreadsheet_title(metadata: dict[str, Any]) -> str:
        return (metadata.get("properties") or {}).get("title", "")

    @staticmethod
    def spreadsheet_url(metadata: dict[str, Any], spreadsheet_id: str) -> str:
        return metadata.get("spreadsheetUrl") or SPREADSHEET_URL_TEMPLATE.format(id=spreadsheet_id)

    @staticmethod
    def sheet_properties(metadata: dict[str, Any]) -> list[dict[str, Any]]:
        """Sheet property objects ordered by index."""
        props = [s.get("properties") or {} for s in metadata.get("sheets") or []]
        return sorted(props, key=lambda p: p.get("index", 0))

    @classmethod
    def describe_sheets(cls, metadata: dict[str, Any]) -> list[WorksheetDescriptor]:
        out = []
        for p in cls.sheet_properties(metadata):
            grid = p.get("gridProperties") or {}
            out.append(
                WorksheetDescriptor(
                    name=p.get("title", ""),
                    index=p.get("index", 0),
                    row_count=grid.get("rowCount", 0),
                    column_count=grid.get("columnCount", 0),
                )
            )
        return out

    @classmethod
    def find_sheet(cls, metadata: dict[str, Any], sheet_name: str) -> dict[str, Any] | None:
        """Exact, case-sensitive title match."""
        for p in cls.sheet_properties(metadata):
            if p.get("title") == sheet_name:
                return p
        return None
