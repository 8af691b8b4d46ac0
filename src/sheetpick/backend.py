"""
Workbook backend: the narrow set of workbook operations the core relies on.

``core`` only talks to a ``WorkbookBackend``; ``OpenpyxlBackend`` is the
implementation used everywhere by default.
"""

from copy import copy
from pathlib import Path
from typing import List, Protocol, Union
import logging

from openpyxl import Workbook
from openpyxl.worksheet.page import PrintPageSetup
from openpyxl.worksheet.worksheet import Worksheet

from .io_utils import load_workbook_safe, save_workbook_safe

logger = logging.getLogger(__name__)


class WorkbookBackend(Protocol):
    """Capabilities the extraction and merge logic need from a spreadsheet library."""

    def new_workbook(self): ...

    def load(self, path: Union[str, Path]): ...

    def save(self, book, path: Union[str, Path]) -> Path: ...

    def close(self, book) -> None: ...

    def sheet_names(self, book) -> List[str]: ...

    def remove_sheet(self, book, name: str) -> None: ...

    def copy_sheet(self, source, name: str, destination, title: str) -> None:
        """Clone sheet ``name`` of ``source`` and append it to ``destination`` as ``title``."""
        ...


class OpenpyxlBackend:
    """``WorkbookBackend`` over openpyxl workbooks."""

    def new_workbook(self) -> Workbook:
        wb = Workbook()
        # Drop the default "Sheet" so the result only holds copied sheets
        wb.remove(wb.active)
        return wb

    def load(self, path: Union[str, Path]) -> Workbook:
        return load_workbook_safe(Path(path))

    def save(self, book: Workbook, path: Union[str, Path]) -> Path:
        return save_workbook_safe(book, Path(path))

    def close(self, book: Workbook) -> None:
        book.close()

    def sheet_names(self, book: Workbook) -> List[str]:
        return list(book.sheetnames)

    def remove_sheet(self, book: Workbook, name: str) -> None:
        active = book.active
        book.remove(book[name])
        if not book.sheetnames:
            return

        if active is None or active.title not in book.sheetnames or active.sheet_state != "visible":
            visible = [ws for ws in book.worksheets if ws.sheet_state == "visible"]
            active = visible[0] if visible else None

        if active is None:
            book.active = 0
        else:
            book.active = active

        # Only the active tab may stay selected, otherwise Excel opens the sheets grouped
        for ws in book.worksheets:
            ws.sheet_view.tabSelected = ws is book.active

    def copy_sheet(self, source: Workbook, name: str, destination: Workbook, title: str) -> None:
        source_ws = source[name]
        target_ws = destination.create_sheet(title=title)

        if not isinstance(source_ws, Worksheet):
            logger.warning(f"Sheet '{name}' is not a worksheet; only an empty sheet was created")
            return

        copy_sheet_contents(source_ws, target_ws)


def copy_sheet_contents(source_ws: Worksheet, target_ws: Worksheet) -> None:
    """
    Copy values, styles and sheet layout from one worksheet to another.

    The worksheets may belong to different workbooks. Copies cell values and
    formatting, hyperlinks, comments, row/column dimensions, merged ranges,
    freeze panes, auto filter, data validations, conditional formatting,
    print titles and area, page setup, zoom, gridlines, tab colour and
    visibility.
    """
    if source_ws.sheet_properties.tabColor is not None:
        target_ws.sheet_properties.tabColor = copy(source_ws.sheet_properties.tabColor)
    if source_ws.freeze_panes:
        target_ws.freeze_panes = source_ws.freeze_panes
    target_ws.sheet_state = source_ws.sheet_state

    for idx, row_dimension in source_ws.row_dimensions.items():
        target_dimension = target_ws.row_dimensions[idx]
        if row_dimension.height is not None:
            target_dimension.height = row_dimension.height
        if row_dimension.hidden:
            target_dimension.hidden = row_dimension.hidden
        if row_dimension.outlineLevel:
            target_dimension.outlineLevel = row_dimension.outlineLevel

    for key, column_dimension in source_ws.column_dimensions.items():
        target_dimension = target_ws.column_dimensions[key]
        # A single dimension can span several columns (<col min="1" max="5">)
        target_dimension.min = column_dimension.min
        target_dimension.max = column_dimension.max
        if column_dimension.width is not None:
            target_dimension.width = column_dimension.width
        if column_dimension.hidden:
            target_dimension.hidden = column_dimension.hidden
        if column_dimension.outlineLevel:
            target_dimension.outlineLevel = column_dimension.outlineLevel

    if source_ws.auto_filter and source_ws.auto_filter.ref:
        target_ws.auto_filter.ref = source_ws.auto_filter.ref

    for row in source_ws.iter_rows():
        for cell in row:
            target_cell = target_ws.cell(row=cell.row, column=cell.column, value=cell.value)
            if cell.has_style:
                target_cell.font = copy(cell.font)
                target_cell.border = copy(cell.border)
                target_cell.fill = copy(cell.fill)
                target_cell.number_format = cell.number_format
                target_cell.protection = copy(cell.protection)
                target_cell.alignment = copy(cell.alignment)
            if cell.hyperlink:
                target_cell.hyperlink = copy(cell.hyperlink)
            if cell.comment:
                target_cell.comment = copy(cell.comment)

    for merged in source_ws.merged_cells.ranges:
        target_ws.merge_cells(str(merged))

    for validation in source_ws.data_validations.dataValidation:
        target_ws.add_data_validation(copy(validation))

    copy_conditional_formatting(source_ws, target_ws)
    copy_print_settings(source_ws, target_ws)

    target_ws.sheet_view.zoomScale = source_ws.sheet_view.zoomScale
    target_ws.sheet_view.showGridLines = source_ws.sheet_view.showGridLines


def copy_conditional_formatting(source_ws: Worksheet, target_ws: Worksheet) -> None:
    for formatting in source_ws.conditional_formatting:
        for rule in formatting.rules:
            target_rule = copy(rule)
            # dxfId points into the source workbook's styles; the writer
            # assigns a new one from dxf
            target_rule.dxfId = None
            if rule.dxf is not None:
                target_rule.dxf = copy(rule.dxf)
            target_ws.conditional_formatting.add(str(formatting.sqref), target_rule)


def copy_print_settings(source_ws: Worksheet, target_ws: Worksheet) -> None:
    """Copy print titles, print area, page setup, margins and print options."""
    if source_ws.print_title_rows:
        target_ws.print_title_rows = source_ws.print_title_rows
    if source_ws.print_title_cols:
        target_ws.print_title_cols = source_ws.print_title_cols
    if source_ws.print_area:
        target_ws.print_area = source_ws.print_area

    for attr in PrintPageSetup.__attrs__:
        # "id" links to printer settings stored in the source package
        if attr != "id":
            setattr(target_ws.page_setup, attr, getattr(source_ws.page_setup, attr))
    if source_ws.sheet_properties.pageSetUpPr is not None:
        target_ws.sheet_properties.pageSetUpPr = copy(source_ws.sheet_properties.pageSetUpPr)

    target_ws.page_margins = copy(source_ws.page_margins)
    target_ws.print_options = copy(source_ws.print_options)
