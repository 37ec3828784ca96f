"""
Type definitions for the MCP server.
Cell values, cell records, worksheet descriptors and response envelopes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypedDict


class ValueKind(str, Enum):
    """Tag for a cell's raw value."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class InferredType(str, Enum):
    """Coarse semantic classification of a cell."""
    STRING = "string"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class RawValue:
    """A cell's underlying value, tagged by kind."""
    kind: ValueKind
    value: str | int | float | bool

    @classmethod
    def string(cls, value: str) -> RawValue:
        return cls(ValueKind.STRING, value)

    @classmethod
    def number(cls, value: int | float) -> RawValue:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> RawValue:
        return cls(ValueKind.BOOLEAN, value)

    @classmethod
    def from_api(cls, effective_value: Any) -> RawValue | None:
        """
        Build from a Sheets API ExtendedValue.

        Returns None for error values and anything we do not recognize.
        """
        if not isinstance(effective_value, dict):
            return None
        if "boolValue" in effective_value:
            v = effective_value["boolValue"]
            return cls.boolean(v) if isinstance(v, bool) else None
        if "numberValue" in effective_value:
            v = effective_value["numberValue"]
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                return None
            if isinstance(v, float) and not math.isfinite(v):
                return None
            return cls.number(v)
        if "stringValue" in effective_value:
            v = effective_value["stringValue"]
            return cls.string(v) if isinstance(v, str) else None
        return None

    @property
    def is_empty(self) -> bool:
        return self.kind is ValueKind.STRING and self.value == ""

    def as_text(self) -> str:
        """String form used to decide whether the formatted value adds anything."""
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.value else "false"
        return str(self.value)


@dataclass
class CellRecord:
    """One visible cell. Row and column are 1-based."""
    row: int
    column: int
    raw: RawValue
    inferred_type: InferredType
    formatted: str | None = None
    hyperlink: str | None = None
    formatting: dict[str, Any] = field(default_factory=dict)

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.column)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "pos": [self.row, self.column],
            "val": self.raw.value,
            "type": self.inferred_type.value,
        }
        if self.formatted is not None:
            out["fmt"] = self.formatted
        if self.hyperlink is not None:
            out["link"] = self.hyperlink
        if self.formatting:
            out["format"] = self.formatting
        return out


@dataclass(frozen=True)
class WorksheetDescriptor:
    """Worksheet identity and declared grid bounds."""
    name: str
    index: int
    row_count: int
    column_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "index": self.index,
            "rowCount": self.row_count,
            "columnCount": self.column_count,
        }


class FileTimes(TypedDict):
    """Drive file metadata. Any field may be None when Drive is unavailable."""
    createdTime: str | None
    modifiedTime: str | None
    lastModifyingUser: dict[str, Any] | None


@dataclass(frozen=True)
class SpreadsheetSummary:
    id: str
    title: str
    url: str
    sheets: list[WorksheetDescriptor]
    created_time: str | None = None
    modified_time: str | None = None
    last_modifying_user: dict[str, Any] | None = None

    @property
    def sheet_count(self) -> int:
        return len(self.sheets)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "sheetCount": self.sheet_count,
            "sheetNames": [s.to_dict() for s in self.sheets],
            "metadata": {
                "createdTime": self.created_time,
                "modifiedTime": self.modified_time,
                "lastModifyingUser": self.last_modifying_user,
            },
        }


class Dimensions(TypedDict):
    rows: int
    columns: int


class WorksheetMetadata(TypedDict):
    title: str
    dimensions: Dimensions
    createdTime: str | None
    modifiedTime: str | None
    lastModifyingUser: dict[str, Any] | None
    index: int
    gridProperties: dict[str, Any]


class SheetDataResponse(TypedDict):
    spreadsheetId: str
    spreadsheetTitle: str
    spreadsheetUrl: str
    metadata: WorksheetMetadata
    cells: list[dict[str, Any]]
