"""
Summary handler package.

Exports SummaryHandler for metadata-only spreadsheet summaries.
"""
from handlers.summary.handler import SummaryHandler

__all__ = ["SummaryHandler"]
