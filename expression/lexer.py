# expression/lexer.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Lexical analyzer for canonical formula text using SLY

"""Lexical analyzer for canonical propositional formulas.

This module breaks canonical (symbolic) formula text into single-character
tokens for the shunting-yard compiler. Tokens carry their type and value
only; errors reference the offending character rather than a position.

Supported Tokens:
- Variables: any single lowercase ASCII letter (``pq`` is two variables)
- Operators: ¬, ∧, ∨, →, ↔
- Grouping: (, )
- Whitespace: ignored during tokenization
"""

from sly import Lexer

from .exceptions import InvalidToken
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for canonical formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    VAR = r"[a-z]"

    NOT = r"¬"
    AND = r"∧"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"↔"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle characters outside the formula alphabet.

        Args:
            t: SLY token object whose value starts at the bad character

        Raises:
            InvalidToken: Always raised with the offending character
        """
        illegal_char = t.value[0]
        get_logger().debug(f"Illegal character '{illegal_char}' at position {self.index}")

        self.index += 1
        raise InvalidToken(illegal_char)
