"""
Google Sheets MCP Server

Exposes read-only Google Sheets tools to MCP clients over stdio.
"""
import asyncio
import logging
import signal
import sys
from contextlib import asynccontextmanager
from typing import Any, Callable, TypeVar

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent

from config import SERVER_NAME
from core.service_provider import SheetsServiceProvider
from handlers.sheet_data import SheetDataHandler
from handlers.summary import SummaryHandler
from lib.errors import SheetsMcpError
from lib.formatters import format_sheet_data, format_summary
from lib.sheet_utils import to_json
from logging_config import configure_logging

logger = logging.getLogger("sheets_mcp.server")

T = TypeVar("T")


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


class SpreadsheetTools:
    """
    Tool implementations. The provider is injected so tests and the server
    can share one initialized client or substitute a fake.
    """

    def __init__(self, provider: SheetsServiceProvider) -> None:
        self.provider = provider

    async def _run(self, op: str, call: Callable[[Any], T]) -> T:
        """
        Await the shared client, run the blocking handler call in a worker
        thread and convert failures into ToolError (an isError tool result).
        """
        try:
            sheets = await self.provider.get()
            return await asyncio.to_thread(call, sheets)
        except SheetsMcpError as e:
            logger.error("Error in %s [%s]: %s", op, e.code.value, e.message)
            raise ToolError(e.message) from e
        except Exception as e:
            logger.exception("Unexpected error in %s", op)
            raise ToolError(f"Internal error while running {op}.") from e

    async def get_spreadsheet_summary(self, url: str) -> list[TextContent]:
        summary = await self._run(
            "get_spreadsheet_summary",
            lambda sheets: SummaryHandler(sheets).summarize(url),
        )
        return [_text(format_summary(summary)), _text(to_json(summary.to_dict()))]

    async def get_spreadsheet_sheet_data(
        self,
        url: str,
        sheet_name: str,
        include_formatting: bool = False,
    ) -> list[TextContent]:
        data = await self._run(
            "get_spreadsheet_sheet_data",
            lambda sheets: SheetDataHandler(sheets).fetch_sheet_data(
                url, sheet_name, include_formatting=include_formatting
            ),
        )
        return [_text(format_sheet_data(data))]


def create_server(provider: SheetsServiceProvider | None = None) -> FastMCP:
    """Build the MCP server with both tools bound to one service provider."""
    provider = provider or SheetsServiceProvider()
    tools = SpreadsheetTools(provider)

    @asynccontextmanager
    async def lifespan(_server: FastMCP):
        # Initialize before serving; failures are reported by the tools
        try:
            await provider.get()
        except SheetsMcpError as e:
            logger.error("Google Sheets service not ready: %s", e.message)
        except Exception:
            logger.exception("Google Sheets service not ready")
        yield {}

    mcp = FastMCP(SERVER_NAME, lifespan=lifespan)

    @mcp.tool(name="get_spreadsheet_summary", structured_output=False)
    async def get_spreadsheet_summary(url: str) -> list[TextContent]:
        """Get a summary of a Google spreadsheet: its title, number of sheets,
        and each sheet's name and size. Returns metadata only, no cell data.

        Args:
        - url: The complete Google Sheets URL
          (e.g. "https://docs.google.com/spreadsheets/d/1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms/edit")
        """
        return await tools.get_spreadsheet_summary(url)

    @mcp.tool(name="get_spreadsheet_sheet_data", structured_output=False)
    async def get_spreadsheet_sheet_data(
        url: str,
        sheet_name: str,
        include_formatting: bool = False,
    ) -> list[TextContent]:
        """Get the data of one sheet within a Google spreadsheet.

        Returns every non-empty cell as {pos:[row,col], val, type, fmt?, link?}
        with 1-based positions in row-major order. type is one of string,
        number, currency, percentage, date, boolean.

        Args:
        - url: The complete Google Sheets URL
        - sheet_name: Exact sheet name (case-sensitive), e.g. "Sheet1", "Sales Q1"
        - include_formatting: Also return note, colors, text format, alignment
          and number format per cell (default false)
        """
        return await tools.get_spreadsheet_sheet_data(url, sheet_name, include_formatting)

    return mcp


mcp = create_server()


def _handle_sigterm(signum: int, frame: Any) -> None:
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main() -> None:
    configure_logging()
    signal.signal(signal.SIGTERM, _handle_sigterm)
    logger.info("Starting MCP server...")
    try:
        mcp.run("stdio")
    except KeyboardInterrupt:
        logger.info("Received SIGINT, shutting down gracefully...")


# ===== Server Entry Point =====

if __name__ == "__main__":
    main()
