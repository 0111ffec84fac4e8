# tests/integration_tests/test_cli.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test suite for the command-line front end

import pytest
import run_truth_table
from utils.logger import LogLevel, set_log_level


class TestCommandLine:
    """Test cases for run_truth_table.main exit codes and output."""

    def teardown_method(self):
        set_log_level(LogLevel.INFO)

    def test_tsv_output(self, capsys):
        code = run_truth_table.main(["-e", "p ∧ q", "--format", "tsv"])

        assert code == 0
        assert capsys.readouterr().out == (
            "p\tq\tp ∧ q\nF\tF\tF\nF\tT\tF\nT\tF\tF\nT\tT\tT\n"
        )

    def test_csv_output_from_words(self, capsys):
        code = run_truth_table.main(["-e", "p OR q", "-n", "words", "--format", "csv"])

        assert code == 0
        assert capsys.readouterr().out.splitlines()[0] == "p,q,p OR q"

    def test_table_output(self, capsys):
        assert run_truth_table.main(["-e", "p ∧ (q ∨ ¬r)"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2 + 8

    def test_convert_to_words(self, capsys):
        code = run_truth_table.main(["-e", "p ∧ (q ∨ ¬r)", "--convert-to", "words"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "p AND (q OR NOT r)"

    def test_formula_file_and_csv_output(self, tmp_path, capsys):
        formula_file = tmp_path / "formula.txt"
        formula_file.write_text("p IMPLIES q\n", encoding="utf-8")
        output = tmp_path / "out.csv"

        code = run_truth_table.main(
            ["-f", str(formula_file), "-n", "words", "-o", str(output)]
        )

        assert code == 0
        assert output.read_text(encoding="utf-8").splitlines() == [
            "p,q,p IMPLIES q",
            "FALSE,FALSE,TRUE",
            "FALSE,TRUE,TRUE",
            "TRUE,FALSE,FALSE",
            "TRUE,TRUE,TRUE",
        ]

    @pytest.mark.parametrize(
        "formula, expected_code",
        [
            ("p ∧ q", 0),
            ("p ∧ ∧ q", 1),
            ("(p", 1),
            ("∧", 1),
        ],
    )
    def test_validate_only(self, formula, expected_code):
        assert run_truth_table.main(["-e", formula, "--validate-only"]) == expected_code

    def test_formula_error_exit_code(self):
        assert run_truth_table.main(["-e", "(p ∧ q"]) == 1

    def test_variable_cap_exit_code(self):
        assert run_truth_table.main(["-e", "a ∧ b ∧ c", "--max-variables", "2"]) == 2

    def test_variable_cap_disabled(self, capsys):
        assert run_truth_table.main(["-e", "a ∧ b ∧ c", "--max-variables", "0"]) == 0

    def test_missing_formula_file(self, tmp_path):
        assert run_truth_table.main(["-f", str(tmp_path / "missing.txt")]) == 3

    def test_empty_formula_file(self, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("  \n", encoding="utf-8")
        assert run_truth_table.main(["-f", str(empty)]) == 3

    def test_unknown_notation_is_usage_error(self):
        with pytest.raises(SystemExit):
            run_truth_table.main(["-e", "p", "-n", "polish"])

    def test_expression_or_file_required(self):
        with pytest.raises(SystemExit):
            run_truth_table.main([])
