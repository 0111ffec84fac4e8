# expression/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Formula normalization and compilation for propositional logic expressions

"""Propositional formula normalization and compilation.

This package turns raw formula text into the artifacts the evaluator needs.
The pipeline is strictly linear and every stage is a pure function of its
input:

    normalize -> extract_variables -> to_postfix

Core Functions:
    normalize: Converts between word and symbolic notation
    extract_variables: Collects the sorted variable set of canonical text
    to_postfix: Compiles canonical infix text with the shunting-yard algorithm
    compile_formula: Complete normalization and compilation pipeline

Supported Logic:
    - Propositional variables (single lowercase letters)
    - ¬ (NOT), ∧ (AND), ∨ (OR), → (IMPLIES), ↔ (IFF)
    - Parenthetical grouping

Example:
    >>> from expression import compile_formula
    >>> compiled = compile_formula("p AND (q OR NOT r)", "words")
    >>> str(compiled.postfix)
    'p q r ¬ ∨ ∧'
"""

from typing import Union

from .exceptions import (
    EngineError,
    NoVariablesFound,
    InvalidToken,
    MismatchedParentheses,
    InvalidExpression,
    TooManyVariables,
)
from .notation import Notation, normalize, to_symbols, to_words
from .symbols import PRECEDENCE, PostfixExpression
from .variables import extract_variables
from .compiler import CompiledFormula, infix_to_postfix
from utils.logger import get_logger


def to_postfix(canonical: str) -> PostfixExpression:
    """Compile canonical formula text into a postfix token sequence.

    Args:
        canonical: Formula in canonical symbolic notation

    Returns:
        Immutable postfix sequence

    Raises:
        InvalidToken: Text contains a character outside the formula alphabet
        MismatchedParentheses: Parentheses are unbalanced or badly nested
        EngineError: Any other compilation failure

    Example:
        >>> str(to_postfix("p → q → r"))
        'p q → r →'
    """
    logger = get_logger()
    logger.debug(f"Compiling formula: {canonical}")

    try:
        return infix_to_postfix(canonical)

    except EngineError:
        logger.debug("Engine error encountered during compilation")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected compilation error: {type(exc).__name__}: {exc}")
        raise EngineError(str(exc)) from exc


def compile_formula(
    source: str, notation: Union[Notation, str] = Notation.SYMBOLIC
) -> CompiledFormula:
    """Normalize formula text and compile it to postfix.

    The variable set is computed from the canonical text, never from word
    notation.

    Args:
        source: Formula text in the given notation
        notation: Notation the text is written in

    Returns:
        CompiledFormula bundling canonical text, variables and postfix

    Raises:
        ValueError: Unknown notation
        InvalidToken, MismatchedParentheses: Compilation failed
    """
    canonical = normalize(source, notation, Notation.SYMBOLIC)
    variables = extract_variables(canonical)
    postfix = to_postfix(canonical)
    return CompiledFormula(source, canonical, variables, postfix)


__all__ = [
    "normalize",
    "to_symbols",
    "to_words",
    "extract_variables",
    "to_postfix",
    "compile_formula",
    "Notation",
    "CompiledFormula",
    "PostfixExpression",
    "PRECEDENCE",
    "EngineError",
    "NoVariablesFound",
    "InvalidToken",
    "MismatchedParentheses",
    "InvalidExpression",
    "TooManyVariables",
]
