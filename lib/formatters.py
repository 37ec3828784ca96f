"""
Human-readable text blocks returned by the tools.
"""
from lib.sheet_utils import to_json
from lib.types import SheetDataResponse, SpreadsheetSummary


def _or_unknown(value: str | None) -> str:
    return value if value else "unknown"


def format_summary(summary: SpreadsheetSummary) -> str:
    lines = [
        f"**Google Sheet Summary: {summary.title}**",
        "",
        f"Sheet ID: {summary.id}",
        f"URL: {summary.url}",
        f"Number of worksheets: {summary.sheet_count}",
        f"Created: {_or_unknown(summary.created_time)}",
        f"Last modified: {_or_unknown(summary.modified_time)}",
        "",
        "**Available Sheets:**",
    ]
    lines.extend(
        f"- {s.name} ({s.row_count} rows × {s.column_count} columns)" for s in summary.sheets
    )
    return "\n".join(lines)


def format_sheet_data(data: SheetDataResponse) -> str:
    meta = data["metadata"]
    dims = meta["dimensions"]
    header = "\n".join([
        f"**Google Sheet Data: {data['spreadsheetTitle']} - {meta['title']}**",
        "",
        f"Spreadsheet ID: {data['spreadsheetId']}",
        f"URL: {data['spreadsheetUrl']}",
        f"Sheet: {meta['title']}",
        f"Size: {dims['rows']} rows × {dims['columns']} columns",
        f"Created: {_or_unknown(meta['createdTime'])}",
        f"Last modified: {_or_unknown(meta['modifiedTime'])}",
        "",
        f"**Cell Data ({len(data['cells'])} cells with data):**",
    ])
    return header + "\n" + to_json(data)
