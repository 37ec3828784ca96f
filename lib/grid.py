"""
Worksheet grid over the Sheets API GridData payload.

Every accessor answers present-or-absent (None) and never raises, so callers
need no try/except around optional cell properties.
"""
from __future__ import annotations

from typing import Any

from lib.sheet_utils import dig
from lib.types import RawValue


class GridCell:
    """Read-only view of one Sheets API CellData object."""

    __slots__ = ("_data",)

    def __init__(self, data: Any = None) -> None:
        # Anything that is not a CellData mapping reads as an empty cell
        self._data = data if isinstance(data, dict) else {}

    @property
    def raw_value(self) -> RawValue | None:
        return RawValue.from_api(self._data.get("effectiveValue"))

    @property
    def formatted_value(self) -> str | None:
        v = self._data.get("formattedValue")
        return v if isinstance(v, str) else None

    @property
    def hyperlink(self) -> str | None:
        v = self._data.get("hyperlink")
        return v if isinstance(v, str) and v else None

    def get_property(self, *path: str) -> Any | None:
        """Optional nested property, e.g. ("effectiveFormat", "textFormat")."""
        v = dig(self._data, *path)
        if v in (None, "", {}, []):
            return None
        return v


EMPTY_CELL = GridCell()


class WorksheetGrid:
    """
    Rectangular grid addressed by zero-based (row, col).

    Bounds are the worksheet's declared grid size, which can be larger than
    the area the API returned data for.
    """

    def __init__(
        self,
        title: str,
        index: int,
        row_count: int,
        column_count: int,
        cells: dict[tuple[int, int], Any] | None = None,
        grid_properties: dict[str, Any] | None = None,
    ) -> None:
        self.title = title
        self.index = index
        self.row_count = row_count
        self.column_count = column_count
        self.grid_properties = grid_properties or {
            "rowCount": row_count,
            "columnCount": column_count,
        }
        self._cells = cells or {}

    @classmethod
    def from_api(cls, sheet: dict[str, Any]) -> WorksheetGrid:
        """
        Build from one entry of spreadsheets.get(includeGridData=true)["sheets"].
        """
        props = sheet.get("properties") or {}
        grid_props = props.get("gridProperties") or {}

        cells: dict[tuple[int, int], Any] = {}
        for block in sheet.get("data") or []:
            if not isinstance(block, dict):
                continue
            start_row = block.get("startRow", 0)
            start_col = block.get("startColumn", 0)
            for r, row_data in enumerate(block.get("rowData") or []):
                values = row_data.get("values") if isinstance(row_data, dict) else None
                for c, cell_data in enumerate(values or []):
                    if cell_data:
                        cells[(start_row + r, start_col + c)] = cell_data

        return cls(
            title=props.get("title", ""),
            index=props.get("index", 0),
            row_count=grid_props.get("rowCount", 0),
            column_count=grid_props.get("columnCount", 0),
            cells=cells,
            grid_properties=grid_props,
        )

    def cell(self, row: int, col: int) -> GridCell:
        data = self._cells.get((row, col))
        if data is None:
            return EMPTY_CELL
        return GridCell(data)
