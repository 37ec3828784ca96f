"""
Domain handlers for the MCP server.
Each handler reads from Google Sheets through a SheetsClient.
"""
from handlers.sheet_data import SheetDataHandler
from handlers.summary import SummaryHandler

__all__ = [
    "SheetDataHandler",
    "SummaryHandler",
]
