# evaluation/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Postfix evaluation and truth table generation

"""Truth table evaluation interface.

This package provides:
  • evaluate: stack-machine evaluation of a postfix formula for one assignment
  • generate_table: exhaustive 2^n evaluation of a canonical formula
  • build_truth_table: notation-aware entry point used by front ends
  • are_equivalent: row-by-row comparison of two formulas
  • FormulaClass / classify: tautology, contingency or contradiction
"""

from .evaluator import evaluate, BINARY_OPERATIONS
from .classification import FormulaClass, classify
from .truth_table import (
    TruthTable,
    TruthTableRow,
    generate_table,
    build_truth_table,
    row_inputs,
    truth_column,
    are_equivalent,
)

__all__ = [
    "evaluate",
    "BINARY_OPERATIONS",
    "FormulaClass",
    "classify",
    "TruthTable",
    "TruthTableRow",
    "generate_table",
    "build_truth_table",
    "row_inputs",
    "truth_column",
    "are_equivalent",
]
