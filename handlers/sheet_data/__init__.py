"""
Sheet data handler package.

Exports SheetDataHandler for single-worksheet cell retrieval.
"""
from handlers.sheet_data.handler import SheetDataHandler

__all__ = ["SheetDataHandler"]
