"""
Sheet data handler.

Fetches one worksheet by exact title and returns every visible cell,
typed and position addressed.
"""
from typing import Any, ClassVar

from core.base_handler import BaseHandler
from core.cell_extractor import extract_cells
from lib.errors import SheetDataRetrievalError, UpstreamError, WorksheetNotFoundError
from lib.grid import WorksheetGrid
from lib.types import SheetDataResponse


class SheetDataHandler(BaseHandler):
    """
    Resolve -> load metadata -> find worksheet -> load its grid -> extract.

    A missing worksheet is reported before any grid data is requested.
    """

    OP_NAME: ClassVar[str] = "sheet_data"
    UPSTREAM_ERROR: ClassVar[type[UpstreamError]] = SheetDataRetrievalError

    def fetch_sheet_data(
        self,
        url: Any,
        sheet_name: str,
        include_formatting: bool = False,
    ) -> SheetDataResponse:
        """
        Fetch one worksheet's cells.

        Args:
            url: Google Sheets URL
            sheet_name: Worksheet title, matched exactly (case-sensitive)
            include_formatting: Copy optional formatting properties per cell

        Returns:
            SheetDataResponse envelope

        Raises:
            MalformedUrlError / InvalidUrlError: Bad URL
            WorksheetNotFoundError: No worksheet with that title
            SheetDataRetrievalError: Any Google API failure
        """
        self.logger.info("Retrieving specific sheet data...")
        spreadsheet_id = self.resolve(url)
        response = self.run_guarded(
            self._build, spreadsheet_id, sheet_name, include_formatting
        )
        self.logger.info(
            "Successfully retrieved sheet data (%d cells)", len(response["cells"])
        )
        return response

    def _build(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        include_formatting: bool,
    ) -> SheetDataResponse:
        metadata = self.load_metadata(spreadsheet_id)

        if self.find_sheet(metadata, sheet_name) is None:
            raise WorksheetNotFoundError(sheet_name)

        sheet = self.sheets.fetch_grid(spreadsheet_id, sheet_name)
        grid = WorksheetGrid.from_api(sheet)
        extracted = extract_cells(grid, include_formatting=include_formatting)
        times = self.load_file_times(spreadsheet_id)

        return {
            "spreadsheetId": spreadsheet_id,
            "spreadsheetTitle": self.spreadsheet_title(metadata),
            "spreadsheetUrl": self.spreadsheet_url(metadata, spreadsheet_id),
            "metadata": {
                "title": extracted["metadata"]["title"],
                "dimensions": extracted["metadata"]["dimensions"],
                "createdTime": times["createdTime"],
                "modifiedTime": times["modifiedTime"],
                "lastModifyingUser": times["lastModifyingUser"],
                "index": extracted["metadata"]["index"],
                "gridProperties": extracted["metadata"]["gridProperties"],
            },
            "cells": [c.to_dict() for c in extracted["cells"]],
        }
