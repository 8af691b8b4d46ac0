"""
Shared fixtures: temporary directories and small workbook builders.
"""

from pathlib import Path
import shutil
import tempfile

import openpyxl
import pytest


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for test outputs."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    # Cleanup after test
    shutil.rmtree(temp_dir)


@pytest.fixture
def make_workbook(temp_output_dir):
    """
    Return a builder that saves a workbook with the given sheets.

    Each sheet gets its own name in A1 and a row number in A2, so copies can
    be traced back to their source.
    """
    def _make(filename, sheet_names):
        wb = openpyxl.Workbook()
        wb.remove(wb.active)

        for idx, name in enumerate(sheet_names, start=1):
            ws = wb.create_sheet(name)
            ws['A1'] = name
            ws['A2'] = idx

        path = temp_output_dir / filename
        wb.save(path)
        wb.close()
        return path

    return _make


class MemoryBackend:
    """In-memory workbook backend: a workbook is a list of (name, payload) pairs."""

    def __init__(self, books=None):
        self.books = {str(path): list(sheets) for path, sheets in (books or {}).items()}
        self.saved = {}
        self.loaded = []

    def new_workbook(self):
        return []

    def load(self, path):
        from sheetpick.errors import SourceReadError

        self.loaded.append(str(path))
        if str(path) not in self.books:
            raise SourceReadError(path, "file not found")
        return list(self.books[str(path)])

    def save(self, book, path):
        self.saved[str(path)] = list(book)
        return Path(path)

    def close(self, book):
        pass

    def sheet_names(self, book):
        return [name for name, _ in book]

    def remove_sheet(self, book, name):
        book[:] = [sheet for sheet in book if sheet[0] != name]

    def copy_sheet(self, source, name, destination, title):
        payload = next(payload for sheet_name, payload in source if sheet_name == name)
        destination.append((title, payload))


@pytest.fixture
def memory_backend():
    return MemoryBackend
