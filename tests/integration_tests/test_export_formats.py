# tests/integration_tests/test_export_formats.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test suite for clipboard text, CSV and terminal renderings of truth tables

import pytest
from evaluation import build_truth_table
from utils.export import to_clipboard_text, to_csv, write_csv, format_table


class TestExportFormats:
    """Test cases for table serialization."""

    def setup_method(self):
        self.table = build_truth_table("p AND q", "words")

    def test_clipboard_text(self):
        """Test tab separated T/F output with the original formula as header."""
        expected = (
            "p\tq\tp AND q\n"
            "F\tF\tF\n"
            "F\tT\tF\n"
            "T\tF\tF\n"
            "T\tT\tT\n"
        )
        assert to_clipboard_text(self.table) == expected

    def test_csv(self):
        """Test comma separated TRUE/FALSE output with trailing newlines."""
        expected = (
            "p,q,p AND q\n"
            "FALSE,FALSE,FALSE\n"
            "FALSE,TRUE,FALSE\n"
            "TRUE,FALSE,FALSE\n"
            "TRUE,TRUE,TRUE\n"
        )
        assert to_csv(self.table) == expected

    def test_export_rows_follow_table_order(self, symbolic_formula, expected_reference_outputs):
        """Test exported output column matches the table's row order."""
        table = build_truth_table(symbolic_formula)
        body = to_csv(table).splitlines()[1:]

        assert len(body) == 8
        assert [line.split(",")[-1] == "TRUE" for line in body] == expected_reference_outputs

    def test_symbolic_header(self, symbolic_formula):
        table = build_truth_table(symbolic_formula)
        header = to_clipboard_text(table).splitlines()[0]
        assert header == "p\tq\tr\tp ∧ (q ∨ ¬r)"

    def test_write_csv(self, tmp_path):
        """Test CSV files are written as UTF-8 with the same content."""
        table = build_truth_table("p → q")
        path = write_csv(table, tmp_path / "truth_table.csv")

        assert path.read_text(encoding="utf-8") == to_csv(table)
        assert "p → q" in path.read_text(encoding="utf-8")

    def test_format_table(self):
        """Test terminal grid has a header, separator and one line per row."""
        lines = format_table(self.table).splitlines()

        assert len(lines) == 2 + len(self.table)
        assert lines[0].split(" | ") == ["p", "q", "p AND q"]
        assert set(lines[1]) <= {"-", "+"}
        assert lines[-1].split() == ["T", "|", "T", "|", "T"]
