"""
Command-line interface for sheetpick using Typer.
"""

from pathlib import Path
from typing import List, Optional, Annotated

import typer
from rich.console import Console

from . import __version__
from .core import extract_by_keyword, extract_by_selection, list_sheets, merge_files
from .io_utils import default_extract_path, default_merge_path
from .logging_utils import (
    setup_logging,
    print_sheet_table,
    print_summary_table,
    print_success_message,
    print_error_message,
    print_progress_step
)

app = typer.Typer(
    name="sheetpick",
    help="Extract worksheets from Excel workbooks and merge workbooks together",
    add_completion=False
)

console = Console()

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging")
]
OutOption = Annotated[
    Optional[Path],
    typer.Option("--out", "-o", help="Output Excel file (default: next to the input)")
]


@app.command()
def sheets(
    input_file: Annotated[Path, typer.Argument(help="Path to input Excel file")],
    verbose: VerboseOption = False,
) -> None:
    """
    List the sheets of a workbook in order.
    """
    setup_logging(verbose)

    try:
        names = list_sheets(input_file)
        print_sheet_table(names, title=input_file.name, console=console)
    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def keyword(
    input_file: Annotated[Path, typer.Argument(help="Path to input Excel file")],
    word: Annotated[str, typer.Argument(metavar="KEYWORD", help="Text the sheet names must contain (case-sensitive)")],
    out: OutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Extract every sheet whose name contains KEYWORD into a new workbook.

    Examples:

        # Writes extract_2023.xlsx next to budget.xlsx
        sheetpick keyword budget.xlsx 2023

        sheetpick keyword budget.xlsx Sales --out sales_only.xlsx
    """
    setup_logging(verbose)

    word = word.strip()
    if not word:
        print_error_message("Keyword must not be empty", console)
        raise typer.Exit(1)

    output_path = out or default_extract_path(input_file, keyword=word)

    try:
        print_progress_step(f"Extracting sheets containing '{word}'...", console)
        count = extract_by_keyword(input_file, word, output_path)
        _report(input_file, output_path, count, "keyword", word)
    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def select(
    input_file: Annotated[Path, typer.Argument(help="Path to input Excel file")],
    sheet: Annotated[
        Optional[List[str]],
        typer.Option("--sheet", "-s", help="Sheet to keep (repeat for several sheets)")
    ] = None,
    out: OutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Extract the named sheets into a new workbook.

    Examples:

        sheetpick select budget.xlsx -s Summary -s "Q1 Detail"
    """
    setup_logging(verbose)

    selection = sheet or []
    output_path = out or default_extract_path(input_file)

    try:
        print_progress_step(f"Extracting {len(selection)} selected sheets...", console)
        count = extract_by_selection(input_file, selection, output_path)
        _report(input_file, output_path, count, "selection", ", ".join(selection))
    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def merge(
    input_files: Annotated[List[Path], typer.Argument(help="Excel files to merge, in order")],
    out: OutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Merge the sheets of several workbooks into one.

    Each sheet is renamed to <file name>_<sheet name>; long or duplicate
    names are shortened and numbered to stay unique.

    Examples:

        # Writes merged.xlsx next to north.xlsx
        sheetpick merge north.xlsx south.xlsx

        sheetpick merge *.xlsx --out all_regions.xlsx
    """
    setup_logging(verbose)

    output_path = out or default_merge_path(input_files)

    try:
        print_progress_step(f"Merging {len(input_files)} workbooks...", console)
        total = merge_files(input_files, output_path)

        print_summary_table({
            "Input Files": len(input_files),
            "Sheets Merged": total,
            "Output File": output_path,
        }, console)
        print_sheet_table(list_sheets(output_path), title="Merged Sheets", console=console)
        print_success_message(total, str(output_path), console)
    except Exception as e:
        print_error_message(str(e), console)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"sheetpick version {__version__}")


def _report(input_file: Path, output_path: Path, count: int, mode: str, criteria: str) -> None:
    print_summary_table({
        "Input File": input_file,
        "Mode": mode,
        "Criteria": criteria,
        "Sheets Written": count,
        "Output File": output_path,
    }, console)
    print_sheet_table(list_sheets(output_path), title="Extracted Sheets", console=console)
    print_success_message(count, str(output_path), console)


if __name__ == "__main__":
    app()
