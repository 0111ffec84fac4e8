# expression/notation.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Conversion between word-based and symbolic formula notation

"""Notation normalizer for propositional formulas.

Formulas are accepted in two notations:

- Symbolic: ``p ∧ (q ∨ ¬r)``
- Words:    ``p AND (q OR NOT r)``, also accepting the ASCII aliases
  ``!``, ``&&``, ``||``, ``=>`` and ``<=>``

Everything downstream of this module works on canonical (symbolic) text only,
because the letters of word operators would otherwise be mistaken for
variables. Alphabetic aliases are matched case-insensitively and only as whole
words, so the matcher never fires inside a longer identifier.
"""

import re
from enum import Enum
from typing import Tuple, Union

from .symbols import NOT, AND, OR, IMPLIES, IFF, OPERATOR_WORDS
from utils.logger import get_logger


class Notation(Enum):
    """Supported formula notations."""

    SYMBOLIC = "symbolic"
    WORDS = "words"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Union["Notation", str]) -> "Notation":
        """Accept a Notation member or its (case-insensitive) string value.

        Raises:
            ValueError: If value names no known notation
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown notation '{value}' (expected one of: {choices})")


_WHITESPACE = re.compile(r"\s+")

# <=> must be matched before =>
_WORDS_TO_SYMBOLS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"<=>|\bIFF\b", re.IGNORECASE), IFF),
    (re.compile(r"=>|\bIMPLIES\b", re.IGNORECASE), IMPLIES),
    (re.compile(r"&&|\bAND\b", re.IGNORECASE), AND),
    (re.compile(r"\|\||\bOR\b", re.IGNORECASE), OR),
    (re.compile(r"(?:!|\bNOT\b)\s*", re.IGNORECASE), NOT),
)

_SYMBOLS_TO_WORDS: Tuple[Tuple[str, str], ...] = (
    (NOT, f"{OPERATOR_WORDS[NOT]} "),
    (AND, f" {OPERATOR_WORDS[AND]} "),
    (OR, f" {OPERATOR_WORDS[OR]} "),
    (IMPLIES, f" {OPERATOR_WORDS[IMPLIES]} "),
    (IFF, f" {OPERATOR_WORDS[IFF]} "),
)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE.sub(" ", text).strip()


def to_symbols(text: str) -> str:
    """Convert word notation (and ASCII aliases) into canonical symbolic text.

    Args:
        text: Formula in word notation, e.g. ``p AND (q OR NOT r)``

    Returns:
        Canonical symbolic text, e.g. ``p ∧ (q ∨ ¬r)``
    """
    result = text
    for pattern, symbol in _WORDS_TO_SYMBOLS:
        result = pattern.sub(symbol, result)
    return collapse_whitespace(result)


def to_words(text: str) -> str:
    """Convert symbolic text into word notation.

    Not a strict round-trip of arbitrary whitespace, but operator identity and
    operand adjacency are preserved.
    """
    result = text
    for symbol, word in _SYMBOLS_TO_WORDS:
        result = result.replace(symbol, word)
    return collapse_whitespace(result)


def normalize(
    text: str,
    from_notation: Union[Notation, str] = Notation.WORDS,
    to_notation: Union[Notation, str] = Notation.SYMBOLIC,
) -> str:
    """Rewrite formula text from one notation into another.

    When both notations are the same only whitespace is canonicalized.

    Args:
        text: Formula text written in from_notation
        from_notation: Notation of the input text
        to_notation: Desired output notation

    Returns:
        Formula text in to_notation

    Raises:
        ValueError: If either notation is unknown
    """
    source = Notation.coerce(from_notation)
    target = Notation.coerce(to_notation)

    if source is target:
        result = collapse_whitespace(text)
    elif target is Notation.SYMBOLIC:
        result = to_symbols(text)
    else:
        result = to_words(text)

    get_logger().formula_normalized(text, result, f"{source} -> {target}")
    return result
