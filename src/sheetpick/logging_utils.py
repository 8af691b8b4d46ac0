"""
Logging configuration using Rich for beautiful console output.
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging with Rich handler.

    Args:
        verbose: Whether to enable debug-level logging
    """
    console = Console(stderr=True)

    level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[rich_handler],
        force=True
    )

    # Reduce noise from other libraries
    logging.getLogger("openpyxl").setLevel(logging.WARNING)


def print_sheet_table(
    sheet_names: Sequence[str],
    title: str = "Sheets",
    console: Optional[Console] = None
) -> None:
    """
    Print a numbered table of sheet names.

    Args:
        sheet_names: Sheet names in workbook order
        title: Table title
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    if not sheet_names:
        console.print("[yellow]The workbook contains no sheets.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Sheet", style="white")

    for idx, name in enumerate(sheet_names, start=1):
        table.add_row(str(idx), escape(name))

    console.print()
    console.print(table)


def print_summary_table(summary: dict, console: Optional[Console] = None) -> None:
    """
    Print a formatted summary table of an extract or merge operation.

    Args:
        summary: Mapping of property name to value
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    table = Table(title="Summary", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in summary.items():
        table.add_row(str(key), escape(str(value)))

    console.print()
    console.print(table)


def print_success_message(sheets_written: int, output_path: str, console: Optional[Console] = None) -> None:
    """
    Print a success message with sheet count and output file.

    Args:
        sheets_written: Number of sheets written
        output_path: Output file path
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(f"✅ [bold green]Wrote {sheets_written} sheets to:[/bold green]")
    console.print(f"   [cyan]{escape(str(output_path))}[/cyan]")


def print_error_message(error: str, console: Optional[Console] = None) -> None:
    """
    Print an error message with Rich formatting.

    Args:
        error: Error message to display
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(f"❌ [bold red]Error:[/bold red] {escape(error)}")


def print_progress_step(step: str, console: Optional[Console] = None) -> None:
    """
    Print a progress step message.

    Args:
        step: Description of the current step
        console: Rich console instance (creates new one if None)
    """
    if console is None:
        console = Console()

    console.print(f"🔄 [bold blue]{step}[/bold blue]")
