"""
Exceptions raised by sheet extraction and merge operations.

Every error derives from ``ValueError`` so callers that already guard
workbook handling with ``except ValueError`` keep working.
"""

from pathlib import Path
from typing import Union


class SheetpickError(ValueError):
    """Base class for all sheetpick failures."""


class SourceReadError(SheetpickError):
    """A source workbook could not be opened or parsed."""

    def __init__(self, path: Union[str, Path], reason: object):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load Excel file {path}: {reason}")


class DestinationWriteError(SheetpickError):
    """The output workbook could not be written."""

    def __init__(self, path: Union[str, Path], reason: object):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write Excel file {path}: {reason}")


class EmptySelectionError(SheetpickError):
    def __init__(self):
        super().__init__("No sheets were selected")


class NoKeywordMatchError(SheetpickError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"No sheet name contains the keyword '{keyword}'")


class NoMatchingSheetsError(SheetpickError):
    def __init__(self):
        super().__init__("None of the requested sheets exist in the workbook")


class TooFewFilesError(SheetpickError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 workbooks are required to merge, got {count}")


class NothingToMergeError(SheetpickError):
    def __init__(self):
        super().__init__("The source workbooks contain no sheets to merge")
