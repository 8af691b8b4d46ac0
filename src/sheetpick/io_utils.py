"""
I/O utilities for workbook files and output paths.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union

import openpyxl
from openpyxl.workbook import Workbook

from .config import (
    DEFAULT_EXTRACT_PREFIX,
    DEFAULT_LIMITS,
    DEFAULT_MERGE_NAME,
    EXCEL_EXTENSIONS,
    OUTPUT_EXTENSION,
)
from .errors import DestinationWriteError, SheetpickError, SourceReadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_workbook_safe(path: PathLike) -> Workbook:
    """
    Safely load an Excel workbook.

    Args:
        path: Path to the Excel file

    Returns:
        Loaded openpyxl workbook

    Raises:
        SourceReadError: If the file is missing, not an Excel file, or unreadable
    """
    path = Path(path)

    if not path.exists():
        raise SourceReadError(path, "file not found")

    if path.suffix.lower() not in EXCEL_EXTENSIONS:
        raise SourceReadError(path, "file must be an Excel file (.xlsx or .xlsm)")

    try:
        return openpyxl.load_workbook(path, data_only=False)
    except Exception as e:
        raise SourceReadError(path, e) from e


def save_workbook_safe(wb: Workbook, path: PathLike) -> Path:
    """
    Write a workbook so that a failed save never leaves a partial file.

    The workbook is written to a temporary file next to the destination and
    moved into place once complete.

    Args:
        wb: Workbook to write
        path: Destination path

    Returns:
        The destination path

    Raises:
        DestinationWriteError: If the directory cannot be created or the write fails
    """
    path = Path(path)

    try:
        ensure_out_dir(path.parent)
        fd, tmp_name = tempfile.mkstemp(prefix=".sheetpick-", suffix=".tmp.xlsx", dir=path.parent)
        os.close(fd)
    except OSError as e:
        raise DestinationWriteError(path, e) from e

    try:
        wb.save(tmp_name)
        os.replace(tmp_name, path)
    except Exception as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise DestinationWriteError(path, e) from e

    logger.debug(f"Saved workbook to {path}")
    return path


def file_stem(path: PathLike) -> str:
    """
    Return the file name without its extension, or the placeholder if there is none.

    Args:
        path: Source path

    Returns:
        Stem used to namespace merged sheets
    """
    stem = Path(path).stem
    return stem or DEFAULT_LIMITS.stem_placeholder


def sanitize_filename(text: str) -> str:
    """
    Make a keyword or stem usable inside a default output file name.

    Characters that Windows, macOS or Linux refuse in file names become
    ``_``; runs of whitespace collapse to one space.
    """
    if not text or not text.strip():
        return "Unknown"

    sanitized = re.sub(r'[<>:"|?*\\/]', '_', text.strip())
    sanitized = re.sub(r'\s+', ' ', sanitized)

    # Windows drops trailing dots and spaces silently
    sanitized = sanitized.strip('. ')
    sanitized = sanitized[:200].strip()

    return sanitized or "Unknown"


def ensure_out_dir(path: Path) -> Path:
    """Create the destination folder (and parents) if missing and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_extract_path(input_path: PathLike, keyword: Optional[str] = None) -> Path:
    """
    Build the default destination for an extraction.

    Keyword extractions are named after the keyword, selections after the
    source file. The file lands next to the source.
    """
    input_path = Path(input_path)
    label = keyword if keyword is not None else file_stem(input_path)
    return input_path.with_name(f"{DEFAULT_EXTRACT_PREFIX}_{sanitize_filename(label)}{OUTPUT_EXTENSION}")


def default_merge_path(input_paths: Iterable[PathLike]) -> Path:
    """Place the merged workbook next to the first source."""
    first = next(iter(input_paths), None)
    if first is None:
        return Path(DEFAULT_MERGE_NAME)
    return Path(first).with_name(DEFAULT_MERGE_NAME)


def validate_destination(destination: PathLike, sources: Iterable[PathLike]) -> None:
    """
    Check the destination before any workbook is loaded.

    Output is always plain xlsx (macros are not carried over), so any other
    extension is refused rather than written under a misleading name.

    Raises:
        SheetpickError: If the destination is not an .xlsx file or resolves
            to a source file
    """
    if Path(destination).suffix.lower() != OUTPUT_EXTENSION:
        raise SheetpickError(f"Output file must be an {OUTPUT_EXTENSION} file: {destination}")

    target = Path(destination).resolve()
    for source in sources:
        if Path(source).resolve() == target:
            raise SheetpickError(f"Output file must differ from input file: {destination}")
