"""
sheetpick - extract worksheets from Excel workbooks and merge workbooks.

Sheets can be pulled out of a workbook by keyword or by an explicit list,
and the sheets of several workbooks can be merged into one file with unique,
length-safe names.
"""

__version__ = "0.1.0"

from .core import (
    list_sheets,
    filter_sheets,
    extract_by_keyword,
    extract_by_selection,
    merge_workbooks,
    merge_files,
)
from .naming import NameRegistry, normalize_sheet_name
from .backend import OpenpyxlBackend, WorkbookBackend

__all__ = [
    "list_sheets",
    "filter_sheets",
    "extract_by_keyword",
    "extract_by_selection",
    "merge_workbooks",
    "merge_files",
    "NameRegistry",
    "normalize_sheet_name",
    "OpenpyxlBackend",
    "WorkbookBackend",
]
