"""
Cell extraction.

Walks a worksheet grid row-major over its declared bounds and emits one
compact, typed record per visible cell. Pure function: no API calls, no logging.
"""
from typing import Any

from config import FORMAT_PROPERTIES
from lib.grid import GridCell, WorksheetGrid
from lib.sheet_utils import is_blank
from lib.type_inference import infer_type
from lib.types import CellRecord


def build_cell_record(
    cell: GridCell,
    row: int,
    col: int,
    include_formatting: bool = False,
) -> CellRecord | None:
    """
    Build the record for the cell at zero-based (row, col).

    Returns None unless both the raw value and the formatted value are non-empty.
    """
    raw = cell.raw_value
    formatted = cell.formatted_value
    if raw is None or raw.is_empty or is_blank(formatted):
        return None

    record = CellRecord(
        row=row + 1,
        column=col + 1,
        raw=raw,
        inferred_type=infer_type(raw, formatted),
    )
    if formatted != raw.as_text():
        record.formatted = formatted

    record.hyperlink = cell.hyperlink

    if include_formatting:
        for key, path in FORMAT_PROPERTIES:
            value = cell.get_property(*path)
            if value is not None:
                record.formatting[key] = value

    return record


def iter_cell_records(grid: WorksheetGrid, include_formatting: bool = False):
    """Yield visible cell records in row-major order."""
    for row in range(grid.row_count):
        for col in range(grid.column_count):
            record = build_cell_record(grid.cell(row, col), row, col, include_formatting)
            if record is not None:
                yield record


def extract_cells(grid: WorksheetGrid, include_formatting: bool = False) -> dict[str, Any]:
    """
    Extract worksheet metadata and visible cells.

    Args:
        grid: Loaded worksheet grid
        include_formatting: Also copy note, colors, text format, alignment
                            and number format when present

    Returns:
        {"metadata": {title, index, dimensions, gridProperties},
         "cells": [CellRecord, ...]}
    """
    return {
        "metadata": {
            "title": grid.title,
            "index": grid.index,
            "dimensions": {"rows": grid.row_count, "columns": grid.column_count},
            "gridProperties": grid.grid_properties,
        },
        "cells": list(iter_cell_records(grid, include_formatting)),
    }
