"""
Limits and defaults shared by the extraction and merge operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetLimits:
    """
    Constraints the xlsx format places on worksheet titles.

    Attributes:
        max_name_length: Maximum title length in characters
        ellipsis: Marker appended to titles that had to be shortened
        truncated_length: Characters kept in front of the ellipsis
        stem_placeholder: Prefix used when a file name has no usable stem
    """
    max_name_length: int = 31
    ellipsis: str = "..."
    truncated_length: int = 28
    stem_placeholder: str = "workbook"


DEFAULT_LIMITS = SheetLimits()

# Characters Excel refuses in sheet titles
INVALID_SHEET_CHARS = r'[\\/?*\[\]:]'

EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')

# Sources are loaded without their VBA part, so output is always plain xlsx
OUTPUT_EXTENSION = '.xlsx'

DEFAULT_EXTRACT_PREFIX = "extract"
DEFAULT_MERGE_NAME = "merged.xlsx"
