"""
Pytest configuration and fixtures for MCP server tests.

SheetsClient is replaced by a MagicMock returning Sheets API shaped payloads,
so no test touches the network.
"""
import pytest
from unittest.mock import MagicMock

from tests.helpers import FakeProvider, cell, grid_sheet, sheet_props, spreadsheet_metadata

SPREADSHEET_ID = "1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms"
SPREADSHEET_URL = f"https://docs.google.com/spreadsheets/d/{SPREADSHEET_ID}/edit#gid=0"


@pytest.fixture
def spreadsheet_id():
    return SPREADSHEET_ID


@pytest.fixture
def spreadsheet_url():
    return SPREADSHEET_URL


@pytest.fixture
def sample_metadata():
    """Two worksheets: a large declared grid and a small one."""
    return spreadsheet_metadata(
        SPREADSHEET_ID,
        "Class Data",
        [
            sheet_props("Class Data", index=0, rows=1000, cols=26),
            sheet_props("Sales Q1", index=1, rows=3, cols=3),
        ],
    )


@pytest.fixture
def sample_grid():
    """Sales Q1 grid: header row, typed values, one blank and one hidden cell."""
    return grid_sheet(
        "Sales Q1",
        [
            [cell("Region"), cell("Revenue"), cell("Growth")],
            [cell("North"), cell(1200.5, "$1,200.50"), cell(0.25, "25%")],
            [cell("2024-01-15"), cell(5, "5"), cell(7, "")],
        ],
        index=1,
    )


@pytest.fixture
def file_times():
    return {
        "createdTime": "2024-01-01T09:00:00.000Z",
        "modifiedTime": "2024-03-01T12:30:00.000Z",
        "lastModifyingUser": {"displayName": "Ada", "emailAddress": "ada@example.com"},
    }


@pytest.fixture
def mock_sheets_client(sample_metadata, sample_grid, file_times):
    """
    Mock SheetsClient for unit tests.
    Returns a MagicMock that can be configured per test.
    """
    mock = MagicMock()
    mock.fetch_metadata.return_value = sample_metadata
    mock.fetch_grid.return_value = sample_grid
    mock.fetch_file_times.return_value = file_times
    return mock


@pytest.fixture
def fake_provider(mock_sheets_client):
    return FakeProvider(mock_sheets_client)
