"""
Builders for Sheets API payloads used across tests.
"""
from typing import Any


def cell(value: Any = None, formatted: str | None = None, **extra: Any) -> dict[str, Any]:
    """
    Build a Sheets API CellData dict.

    cell(42, "42%")          -> numberValue 42 displayed as "42%"
    cell("hello")            -> stringValue, formatted defaults to the text
    cell(True, "TRUE")       -> boolValue
    """
    data: dict[str, Any] = {}
    if isinstance(value, bool):
        data["effectiveValue"] = {"boolValue": value}
    elif isinstance(value, (int, float)):
        data["effectiveValue"] = {"numberValue": value}
    elif isinstance(value, str):
        data["effectiveValue"] = {"stringValue": value}
        if formatted is None:
            formatted = value
    if formatted is not None:
        data["formattedValue"] = formatted
    data.update(extra)
    return data


def sheet_props(title: str, index: int = 0, rows: int = 1000, cols: int = 26) -> dict[str, Any]:
    return {
        "sheetId": index,
        "title": title,
        "index": index,
        "sheetType": "GRID",
        "gridProperties": {"rowCount": rows, "columnCount": cols},
    }


def grid_sheet(
    title: str,
    rows: list[list[Any]],
    row_count: int | None = None,
    column_count: int | None = None,
    index: int = 0,
) -> dict[str, Any]:
    """
    Build one spreadsheets.get(includeGridData=true) sheet entry.

    rows holds CellData dicts (or None/{} for empty cells), starting at A1.
    """
    row_count = row_count if row_count is not None else len(rows)
    column_count = column_count if column_count is not None else max((len(r) for r in rows), default=0)
    return {
        "properties": sheet_props(title, index, row_count, column_count),
        "data": [
            {"rowData": [{"values": [c if c is not None else {} for c in r]} for r in rows]}
        ],
    }


def spreadsheet_metadata(
    spreadsheet_id: str,
    title: str,
    sheets: list[dict[str, Any]],
) -> dict[str, Any]:
    return {
        "spreadsheetId": spreadsheet_id,
        "spreadsheetUrl": f"https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit",
        "properties": {"title": title},
        "sheets": [{"properties": p} for p in sheets],
    }


class FakeProvider:
    """Stands in for SheetsServiceProvider."""

    def __init__(self, client: Any = None, error: Exception | None = None) -> None:
        self.client = client
        self.error = error
        self.calls = 0

    async def get(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.client
