"""
Spreadsheet summary handler.

Metadata only: spreadsheet title, worksheet names, indexes and declared sizes.
Never loads cell data, so the cost does not grow with worksheet size.
"""
from typing import Any, ClassVar

from core.base_handler import BaseHandler
from lib.errors import SummaryRetrievalError, UpstreamError
from lib.types import SpreadsheetSummary


class SummaryHandler(BaseHandler):
    """Builds a SpreadsheetSummary from a Google Sheets URL."""

    OP_NAME: ClassVar[str] = "summary"
    UPSTREAM_ERROR: ClassVar[type[UpstreamError]] = SummaryRetrievalError

    def summarize(self, url: Any) -> SpreadsheetSummary:
        """
        Summarize a spreadsheet.

        Args:
            url: Google Sheets URL

        Returns:
            SpreadsheetSummary

        Raises:
            MalformedUrlError / InvalidUrlError: Bad URL
            SummaryRetrievalError: Any Google API failure
        """
        self.logger.info("Retrieving spreadsheet summary...")
        spreadsheet_id = self.resolve(url)
        summary = self.run_guarded(self._build, spreadsheet_id)
        self.logger.info("Successfully retrieved spreadsheet summary")
        return summary

    def _build(self, spreadsheet_id: str) -> SpreadsheetSummary:
        metadata = self.load_metadata(spreadsheet_id)
        times = self.load_file_times(spreadsheet_id)
        return SpreadsheetSummary(
            id=spreadsheet_id,
            title=self.spreadsheet_title(metadata),
            url=self.spreadsheet_url(metadata, spreadsheet_id),
            sheets=self.describe_sheets(metadata),
            created_time=times["createdTime"],
            modified_time=times["modifiedTime"],
            last_modifying_user=times["lastModifyingUser"],
        )
