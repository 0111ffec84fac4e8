# expression/symbols.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Canonical operator symbols, precedence table and postfix sequences

"""Canonical operator alphabet shared by every pipeline stage.

Canonical formula text uses exactly one symbol per operator and one lowercase
letter per variable, so every token is a single character. The precedence
table is process-wide constant configuration exposed as a read-only mapping.

Operator precedence (highest to lowest):
    ¬ (NOT)      4
    ∧ (AND)      3
    ∨ (OR)       2
    → (IMPLIES)  1
    ↔ (IFF)      0

Every operator, including the implication and biconditional, is resolved
left-to-right on ties: ``p → q → r`` groups as ``(p → q) → r``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

NOT = "¬"
AND = "∧"
OR = "∨"
IMPLIES = "→"
IFF = "↔"
LPAREN = "("
RPAREN = ")"

PRECEDENCE: Mapping[str, int] = MappingProxyType(
    {
        NOT: 4,
        AND: 3,
        OR: 2,
        IMPLIES: 1,
        IFF: 0,
    }
)

UNARY_OPERATORS = frozenset({NOT})
BINARY_OPERATORS = frozenset({AND, OR, IMPLIES, IFF})
OPERATORS = UNARY_OPERATORS | BINARY_OPERATORS

# Word spelling of each operator, used by the word notation
OPERATOR_WORDS: Mapping[str, str] = MappingProxyType(
    {
        NOT: "NOT",
        AND: "AND",
        OR: "OR",
        IMPLIES: "IMPLIES",
        IFF: "IFF",
    }
)

VARIABLE_ALPHABET = frozenset(string.ascii_lowercase)


def is_variable(token: str) -> bool:
    """Return True if token is a single lowercase ASCII letter."""
    return len(token) == 1 and token in VARIABLE_ALPHABET


@dataclass(frozen=True, slots=True)
class PostfixExpression:
    """Immutable Reverse Polish token sequence produced by the compiler.

    Attributes:
        tokens: Single-character tokens in postfix order
    """

    tokens: Tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> PostfixExpression:
        """Build a postfix sequence from its space-delimited form."""
        return cls(tuple(text.split()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return " ".join(self.tokens)
