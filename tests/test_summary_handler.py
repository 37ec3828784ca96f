"""
Tests for SummaryHandler.
"""
import pytest

from handlers.summary import SummaryHandler
from lib.errors import MalformedUrlError, SummaryRetrievalError
from lib.types import WorksheetDescriptor


class TestSummarize:
    """Tests for the metadata-only summary."""

    def test_builds_summary(self, mock_sheets_client, spreadsheet_url, spreadsheet_id):
        summary = SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)

        assert summary.id == spreadsheet_id
        assert summary.title == "Class Data"
        assert summary.url.endswith(f"/d/{spreadsheet_id}/edit")
        assert summary.sheet_count == 2
        assert summary.sheets == [
            WorksheetDescriptor("Class Data", 0, 1000, 26),
            WorksheetDescriptor("Sales Q1", 1, 3, 3),
        ]
        assert summary.created_time == "2024-01-01T09:00:00.000Z"
        assert summary.modified_time == "2024-03-01T12:30:00.000Z"
        assert summary.last_modifying_user["displayName"] == "Ada"

    def test_never_loads_cell_grid(self, mock_sheets_client, spreadsheet_url):
        SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)

        mock_sheets_client.fetch_metadata.assert_called_once()
        mock_sheets_client.fetch_grid.assert_not_called()

    def test_passes_resolved_id(self, mock_sheets_client, spreadsheet_id):
        SummaryHandler(mock_sheets_client).summarize(f"https://drive.google.com/open?id={spreadsheet_id}")
        mock_sheets_client.fetch_metadata.assert_called_once_with(spreadsheet_id)

    def test_sheets_sorted_by_index(self, mock_sheets_client, sample_metadata, spreadsheet_url):
        sample_metadata["sheets"].reverse()
        summary = SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)
        assert [s.index for s in summary.sheets] == [0, 1]

    def test_to_dict(self, mock_sheets_client, spreadsheet_url):
        data = SummaryHandler(mock_sheets_client).summarize(spreadsheet_url).to_dict()
        assert data["sheetCount"] == 2
        assert data["sheetNames"][1] == {"name": "Sales Q1", "index": 1, "rowCount": 3, "columnCount": 3}
        assert data["metadata"]["modifiedTime"] == "2024-03-01T12:30:00.000Z"


class TestSummarizeErrors:
    """Tests for error propagation and generalization."""

    def test_malformed_url_propagates(self, mock_sheets_client):
        with pytest.raises(MalformedUrlError):
            SummaryHandler(mock_sheets_client).summarize("not a url")
        mock_sheets_client.fetch_metadata.assert_not_called()

    def test_upstream_error_is_generalized(self, mock_sheets_client, spreadsheet_url):
        mock_sheets_client.fetch_metadata.side_effect = Exception("403 secret internal detail")

        with pytest.raises(SummaryRetrievalError) as exc_info:
            SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)

        assert "secret" not in exc_info.value.message
        assert "Failed to retrieve spreadsheet summary" in exc_info.value.message

    def test_upstream_error_is_logged(self, mock_sheets_client, spreadsheet_url, caplog):
        mock_sheets_client.fetch_metadata.side_effect = Exception("quota exceeded")

        with pytest.raises(SummaryRetrievalError):
            SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)

        assert "quota exceeded" in caplog.text

    def test_drive_failure_leaves_times_empty(self, mock_sheets_client, spreadsheet_url):
        mock_sheets_client.fetch_file_times.side_effect = Exception("insufficient scope")

        summary = SummaryHandler(mock_sheets_client).summarize(spreadsheet_url)

        assert summary.title == "Class Data"
        assert summary.created_time is None
        assert summary.modified_time is None
        assert summary.last_modifying_user is None
