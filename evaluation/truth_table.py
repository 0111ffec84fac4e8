# evaluation/truth_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Exhaustive truth table generation over all variable assignments

"""Truth table generation.

Enumerates all 2^n assignments of a formula's n variables and evaluates the
compiled postfix sequence once per row.

Row order is fixed: row ``i`` assigns to the variable at sorted position
``j`` the value of bit ``n-1-j`` of ``i``. The alphabetically first variable
is therefore the most significant bit, the first row is all false and the last
row is all true. Exports rely on this order matching the displayed table.

A failure while evaluating any row aborts the whole build; partial tables
are never returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple, Union

from expression import normalize, extract_variables, to_postfix
from expression.exceptions import EngineError, NoVariablesFound, TooManyVariables
from expression.notation import Notation
from expression.symbols import PostfixExpression
from utils.config import DEFAULT_CONFIG, DEFAULT_MAX_VARIABLES, EngineConfig
from utils.logger import get_logger

from .classification import FormulaClass, classify
from .evaluator import evaluate


@dataclass(frozen=True, slots=True)
class TruthTableRow:
    """One row of a truth table.

    Attributes:
        inputs: Variable values aligned with TruthTable.variables
        output: Value of the formula for those inputs
    """

    inputs: Tuple[bool, ...]
    output: bool


@dataclass(frozen=True, slots=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        formula: Formula text as entered by the user (used for export headers)
        canonical: Canonical symbolic text the table was computed from
        variables: Sorted variable set, one column per variable
        postfix: Compiled postfix sequence
        rows: 2^n rows in big-endian enumeration order
    """

    formula: str
    canonical: str
    variables: Tuple[str, ...]
    postfix: PostfixExpression
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def outputs(self) -> Tuple[bool, ...]:
        return tuple(row.output for row in self.rows)

    @property
    def classification(self) -> FormulaClass:
        return classify(self.outputs)

    def assignment(self, index: int) -> Dict[str, bool]:
        """Return the variable assignment of row index as a mapping."""
        return dict(zip(self.variables, self.rows[index].inputs))


def row_inputs(variable_count: int, index: int) -> Tuple[bool, ...]:
    """Return the input values of row index for variable_count variables.

    Big-endian: the first variable takes the most significant bit.
    """
    return tuple(
        bool((index >> (variable_count - 1 - position)) & 1)
        for position in range(variable_count)
    )


def generate_table(
    canonical: str,
    max_variables: Optional[int] = DEFAULT_MAX_VARIABLES,
    formula: Optional[str] = None,
) -> TruthTable:
    """Build the truth table of a canonical formula.

    Checks run in this order: variable extraction, variable cap, compilation,
    then row-by-row evaluation.

    Args:
        canonical: Formula in canonical symbolic notation
        max_variables: Largest accepted variable count, or None for no cap
        formula: Original text to record on the table (defaults to canonical)

    Returns:
        Complete TruthTable

    Raises:
        NoVariablesFound: The formula has no variable
        TooManyVariables: The variable count exceeds max_variables
        InvalidToken, MismatchedParentheses: Compilation failed
        InvalidExpression: Evaluation failed on some row
    """
    logger = get_logger()
    source = canonical if formula is None else formula

    try:
        variables = extract_variables(canonical)
        if not variables:
            raise NoVariablesFound(canonical)

        if max_variables is not None and len(variables) > max_variables:
            raise TooManyVariables(len(variables), max_variables)

        postfix = to_postfix(canonical)

        rows = []
        for index in range(2 ** len(variables)):
            inputs = row_inputs(len(variables), index)
            output = evaluate(postfix, dict(zip(variables, inputs)))
            logger.row_evaluated(index, inputs, output)
            rows.append(TruthTableRow(inputs, output))

    except EngineError as exc:
        logger.table_rejected(source, str(exc))
        raise

    logger.table_built(source, len(variables), len(rows))
    return TruthTable(source, canonical, variables, postfix, tuple(rows))


def build_truth_table(
    formula: str,
    notation: Union[Notation, str, None] = None,
    config: Optional[EngineConfig] = None,
) -> TruthTable:
    """Normalize formula text in the given notation and tabulate it.

    This is the entry point used by presentation and export layers. Each call
    recomputes everything from the text; nothing is cached between calls.

    Args:
        formula: Raw formula text
        notation: Notation of the text (defaults to the configured notation)
        config: Engine settings (defaults to DEFAULT_CONFIG)

    Returns:
        TruthTable recording the original formula text

    Raises:
        ValueError: Unknown notation
        EngineError: Any engine failure (see generate_table)
    """
    config = config or DEFAULT_CONFIG
    source_notation = config.notation if notation is None else notation

    canonical = normalize(formula, source_notation, Notation.SYMBOLIC)
    return generate_table(canonical, config.max_variables, formula=formula)


def truth_column(
    formula: str, variables: Sequence[str], notation: Union[Notation, str] = Notation.SYMBOLIC
) -> Tuple[bool, ...]:
    """Evaluate a formula over the full table of an explicit variable set.

    Lets two formulas be compared row by row even when one of them does not
    mention every variable (e.g. ``p ∨ ¬p`` against ``q``).

    Raises:
        KeyError: The formula uses a variable outside variables
        EngineError: Compilation or evaluation failed
    """
    canonical = normalize(formula, notation, Notation.SYMBOLIC)
    postfix = to_postfix(canonical)
    ordered = tuple(sorted(set(variables)))
    return tuple(
        evaluate(postfix, dict(zip(ordered, row_inputs(len(ordered), index))))
        for index in range(2 ** len(ordered))
    )


def are_equivalent(
    left: str, right: str, notation: Union[Notation, str] = Notation.SYMBOLIC
) -> bool:
    """Return True if two formulas agree under every assignment."""
    variables = sorted(
        set(extract_variables(normalize(left, notation, Notation.SYMBOLIC)))
        | set(extract_variables(normalize(right, notation, Notation.SYMBOLIC)))
    )
    if not variables:
        raise NoVariablesFound(f"{left} / {right}")
    return truth_column(left, variables, notation) == truth_column(
        right, variables, notation
    )
