"""
Core orchestration logic for sheet extraction and workbook merging.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import logging

from .backend import OpenpyxlBackend, WorkbookBackend
from .errors import (
    EmptySelectionError,
    NoKeywordMatchError,
    NoMatchingSheetsError,
    NothingToMergeError,
    TooFewFilesError,
)
from .io_utils import file_stem, validate_destination
from .naming import NameRegistry, normalize_sheet_name, sanitize_sheet_name

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def list_sheets(input_path: PathLike, backend: Optional[WorkbookBackend] = None) -> List[str]:
    """
    Return the sheet names of a workbook in workbook order.

    Args:
        input_path: Path to the Excel file
        backend: Workbook backend (openpyxl by default)

    Returns:
        Ordered list of sheet names
    """
    backend = backend or OpenpyxlBackend()
    book = backend.load(input_path)
    try:
        names = backend.sheet_names(book)
    finally:
        backend.close(book)

    logger.debug(f"{input_path}: {len(names)} sheets")
    return names


def filter_sheets(book, wanted: Iterable[str], backend: Optional[WorkbookBackend] = None) -> int:
    """
    Keep only the sheets whose name is in ``wanted``, removing the rest in place.

    Names in ``wanted`` that the workbook does not contain are ignored. The
    remaining sheets keep their original order.

    Args:
        book: Workbook to mutate
        wanted: Names to keep
        backend: Workbook backend (openpyxl by default)

    Returns:
        Number of sheets kept

    Raises:
        NoMatchingSheetsError: If no wanted name exists; the workbook is left untouched
    """
    backend = backend or OpenpyxlBackend()
    wanted = set(wanted)
    existing = backend.sheet_names(book)

    keep = [name for name in existing if name in wanted]
    if not keep:
        raise NoMatchingSheetsError()

    for name in existing:
        if name not in wanted:
            backend.remove_sheet(book, name)
            logger.debug(f"Removed sheet '{name}'")

    return len(keep)


def keyword_matches(names: Iterable[str], keyword: str) -> List[str]:
    """Return the names containing ``keyword`` (case-sensitive substring match)."""
    return [name for name in names if keyword in name]


def extract_by_keyword(
    input_path: PathLike,
    keyword: str,
    output_path: PathLike,
    backend: Optional[WorkbookBackend] = None
) -> int:
    """
    Write a copy of a workbook that holds only the sheets whose name contains ``keyword``.

    Args:
        input_path: Source Excel file
        keyword: Substring to look for in sheet names
        output_path: Destination Excel file
        backend: Workbook backend (openpyxl by default)

    Returns:
        Number of sheets written

    Raises:
        NoKeywordMatchError: If no sheet name contains the keyword
    """
    backend = backend or OpenpyxlBackend()
    validate_destination(output_path, [input_path])

    logger.info(f"Extracting sheets matching '{keyword}' from {input_path}")
    book = backend.load(input_path)
    try:
        selected = keyword_matches(backend.sheet_names(book), keyword)
        if not selected:
            raise NoKeywordMatchError(keyword)

        count = filter_sheets(book, selected, backend)
        backend.save(book, output_path)
    finally:
        backend.close(book)

    logger.info(f"Wrote {count} sheets to {output_path}")
    return count


def extract_by_selection(
    input_path: PathLike,
    sheets: Sequence[str],
    output_path: PathLike,
    backend: Optional[WorkbookBackend] = None
) -> int:
    """
    Write a copy of a workbook that holds only the named sheets.

    Args:
        input_path: Source Excel file
        sheets: Sheet names to keep; unknown names are ignored
        output_path: Destination Excel file
        backend: Workbook backend (openpyxl by default)

    Returns:
        Number of sheets written

    Raises:
        EmptySelectionError: If ``sheets`` is empty
        NoMatchingSheetsError: If none of ``sheets`` exist in the workbook
    """
    if not sheets:
        raise EmptySelectionError()

    backend = backend or OpenpyxlBackend()
    validate_destination(output_path, [input_path])

    logger.info(f"Extracting {len(sheets)} selected sheets from {input_path}")
    book = backend.load(input_path)
    try:
        count = filter_sheets(book, sheets, backend)
        backend.save(book, output_path)
    finally:
        backend.close(book)

    logger.info(f"Wrote {count} sheets to {output_path}")
    return count


def merge_workbooks(
    input_paths: Sequence[PathLike],
    backend: Optional[WorkbookBackend] = None
) -> Tuple[object, int]:
    """
    Copy every sheet of every source into one new workbook.

    Sources are read in the given order and their sheets in workbook order.
    Each copy is named ``<file stem>_<sheet name>``, shortened and suffixed
    as needed so that all names in the result are unique. The sources are
    never modified.

    Args:
        input_paths: Two or more source Excel files
        backend: Workbook backend (openpyxl by default)

    Returns:
        Tuple of (merged workbook, number of sheets copied)

    Raises:
        TooFewFilesError: If fewer than two paths are given
        SourceReadError: If a source cannot be loaded
        NothingToMergeError: If the sources hold no sheets at all
    """
    if len(input_paths) < 2:
        raise TooFewFilesError(len(input_paths))

    backend = backend or OpenpyxlBackend()
    output = backend.new_workbook()
    registry = NameRegistry()
    total = 0

    for path in input_paths:
        book = backend.load(path)
        try:
            stem = sanitize_sheet_name(file_stem(path))
            names = backend.sheet_names(book)
            logger.info(f"Merging {len(names)} sheets from {path}")

            for name in names:
                title = normalize_sheet_name(f"{stem}_{name}", registry)
                backend.copy_sheet(book, name, output, title)
                logger.debug(f"Copied '{name}' from {path} as '{title}'")
                total += 1
        finally:
            backend.close(book)

    if total == 0:
        raise NothingToMergeError()

    return output, total


def merge_files(
    input_paths: Sequence[PathLike],
    output_path: PathLike,
    backend: Optional[WorkbookBackend] = None
) -> int:
    """
    Merge the sources and write the result to ``output_path``.

    Nothing is written unless every source was merged successfully.

    Returns:
        Number of sheets written
    """
    backend = backend or OpenpyxlBackend()
    validate_destination(output_path, input_paths)

    output, total = merge_workbooks(input_paths, backend)
    try:
        backend.save(output, output_path)
    finally:
        backend.close(output)

    logger.info(f"Merged {total} sheets from {len(input_paths)} workbooks into {output_path}")
    return total
