"""
Google Sheets API client using gspread.
Provides Service Account authentication and the read-only calls the tools need.
"""
import json
from typing import Any

import gspread
from google.oauth2.service_account import Credentials

from config import DRIVE_FILE_FIELDS, DRIVE_FILES_URL, GRID_FIELDS, METADATA_FIELDS, SCOPES
from lib.sheet_utils import quote_sheet_title
from lib.types import FileTimes
from logging_config import log_api_call, log_api_result


class SheetsClient:
    """Wrapper around gspread for Google Sheets API access."""

    def __init__(self, credentials_json: str | dict):
        """
        Initialize the client with Service Account credentials.

        Args:
            credentials_json: Either a JSON string or dict containing
                             the Service Account credentials.
        """
        if isinstance(credentials_json, str):
            credentials_json = json.loads(credentials_json)
        creds = Credentials.from_service_account_info(credentials_json, scopes=SCOPES)
        self.gc = gspread.authorize(creds)

    def fetch_metadata(self, spreadsheet_id: str) -> dict[str, Any]:
        """
        Spreadsheet title/URL and every sheet's properties. No cell data.
        """
        log_api_call("sheets", "spreadsheets.get", spreadsheet_id=spreadsheet_id)
        metadata = self.gc.http_client.fetch_sheet_metadata(
            spreadsheet_id,
            params={"includeGridData": "false", "fields": METADATA_FIELDS},
        )
        log_api_result("sheets", "spreadsheets.get", len(metadata.get("sheets", [])))
        return metadata

    def fetch_grid(self, spreadsheet_id: str, sheet_title: str) -> dict[str, Any]:
        """
        One sheet with grid data covering its whole range.

        Returns:
            The matching entry of the API's "sheets" list

        Raises:
            LookupError: If the API returned no sheet for the range
        """
        log_api_call(
            "sheets", "spreadsheets.get", spreadsheet_id=spreadsheet_id, range=sheet_title
        )
        data = self.gc.http_client.fetch_sheet_metadata(
            spreadsheet_id,
            params={
                "includeGridData": "true",
                "ranges": quote_sheet_title(sheet_title),
                "fields": GRID_FIELDS,
            },
        )
        sheets = data.get("sheets") or []
        if not sheets:
            raise LookupError(f"no grid data returned for sheet {sheet_title!r}")
        log_api_result("sheets", "spreadsheets.get")
        return sheets[0]

    def fetch_file_times(self, spreadsheet_id: str) -> FileTimes:
        """Drive created/modified times and the last modifying user."""
        log_api_call("drive", "files.get", file_id=spreadsheet_id)
        r = self.gc.http_client.request(
            "get",
            DRIVE_FILES_URL.format(file_id=spreadsheet_id),
            params={"fields": DRIVE_FILE_FIELDS, "supportsAllDrives": "true"},
        )
        body = r.json()
        log_api_result("drive", "files.get")
        return {
            "createdTime": body.get("createdTime"),
            "modifiedTime": body.get("modifiedTime"),
            "lastModifyingUser": body.get("lastModifyingUser"),
        }
