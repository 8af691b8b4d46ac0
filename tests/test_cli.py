"""
Tests for the sheetpick command-line interface.
"""

from typer.testing import CliRunner

from sheetpick.cli import app
from sheetpick.core import list_sheets

runner = CliRunner()


class TestSheetsCommand:
    """Test suite for the sheets command."""

    def test_lists_sheets(self, make_workbook):
        source = make_workbook("book.xlsx", ["Sales", "Notes"])

        result = runner.invoke(app, ["sheets", str(source)])

        assert result.exit_code == 0
        assert "Sales" in result.output
        assert "Notes" in result.output

    def test_missing_file(self, temp_output_dir):
        result = runner.invoke(app, ["sheets", str(temp_output_dir / "missing.xlsx")])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestKeywordCommand:
    """Test suite for the keyword command."""

    def test_extracts_to_default_path(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["2023_Jan", "2023_Feb", "Notes"])

        result = runner.invoke(app, ["keyword", str(source), "2023"])

        assert result.exit_code == 0
        assert list_sheets(temp_output_dir / "extract_2023.xlsx") == ["2023_Jan", "2023_Feb"]

    def test_explicit_output(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["2023_Jan", "Notes"])
        output = temp_output_dir / "picked.xlsx"

        result = runner.invoke(app, ["keyword", str(source), "Notes", "--out", str(output)])

        assert result.exit_code == 0
        assert list_sheets(output) == ["Notes"]

    def test_keyword_is_stripped(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["2023_Jan", "Notes"])
        output = temp_output_dir / "picked.xlsx"

        result = runner.invoke(app, ["keyword", str(source), "  2023 ", "-o", str(output)])

        assert result.exit_code == 0
        assert list_sheets(output) == ["2023_Jan"]

    def test_blank_keyword_rejected(self, make_workbook):
        source = make_workbook("book.xlsx", ["Notes"])

        result = runner.invoke(app, ["keyword", str(source), "   "])

        assert result.exit_code == 1
        assert "Keyword must not be empty" in result.output

    def test_no_match(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["Notes"])

        result = runner.invoke(app, ["keyword", str(source), "2023"])

        assert result.exit_code == 1
        assert not (temp_output_dir / "extract_2023.xlsx").exists()


class TestSelectCommand:
    """Test suite for the select command."""

    def test_selected_sheets(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["Sales", "Summary", "Notes"])

        result = runner.invoke(app, ["select", str(source), "-s", "Notes", "--sheet", "Sales"])

        assert result.exit_code == 0
        assert list_sheets(temp_output_dir / "extract_book.xlsx") == ["Sales", "Notes"]

    def test_no_selection(self, make_workbook, temp_output_dir):
        source = make_workbook("book.xlsx", ["Sales"])

        result = runner.invoke(app, ["select", str(source)])

        assert result.exit_code == 1
        assert "No sheets were selected" in result.output
        assert not (temp_output_dir / "extract_book.xlsx").exists()


class TestMergeCommand:
    """Test suite for the merge command."""

    def test_merge(self, make_workbook, temp_output_dir):
        a = make_workbook("A.xlsx", ["Sales", "Summary"])
        b = make_workbook("B.xlsx", ["Sales", "Notes"])

        result = runner.invoke(app, ["merge", str(a), str(b)])

        assert result.exit_code == 0
        assert list_sheets(temp_output_dir / "merged.xlsx") == ["A_Sales", "A_Summary", "B_Sales", "B_Notes"]

    def test_single_file_rejected(self, make_workbook, temp_output_dir):
        a = make_workbook("A.xlsx", ["Sales"])

        result = runner.invoke(app, ["merge", str(a), "-o", str(temp_output_dir / "out.xlsx")])

        assert result.exit_code == 1
        assert "At least 2 workbooks" in result.output
        assert not (temp_output_dir / "out.xlsx").exists()

    def test_xlsm_output_rejected(self, make_workbook, temp_output_dir):
        a = make_workbook("A.xlsx", ["Sales"])
        b = make_workbook("B.xlsx", ["Notes"])
        output = temp_output_dir / "result.xlsm"

        result = runner.invoke(app, ["merge", str(a), str(b), "--out", str(output)])

        assert result.exit_code == 1
        assert ".xlsx file" in result.output
        assert not output.exists()


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
