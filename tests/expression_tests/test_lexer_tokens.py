# tests/expression_tests/test_lexer_tokens.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for the canonical formula lexer.

Verifies tokenization of the canonical alphabet and the InvalidToken error
raised for everything outside it.
"""

import pytest
from expression.lexer import FormulaLexer
from expression.exceptions import InvalidToken, EngineError
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("p", ["VAR"]),
        ("¬p", ["NOT", "VAR"]),
        ("p ∧ q", ["VAR", "AND", "VAR"]),
        ("p ∨ q", ["VAR", "OR", "VAR"]),
        ("p → q", ["VAR", "IMPLIES", "VAR"]),
        ("p ↔ q", ["VAR", "IFF", "VAR"]),
        ("()", ["LPAREN", "RPAREN"]),
        # Variables are single letters: adjacent letters are separate tokens
        ("pq", ["VAR", "VAR"]),
        ("p∧(q∨¬r)", ["VAR", "AND", "LPAREN", "VAR", "OR", "NOT", "VAR", "RPAREN"]),
        (" \t p \n ∧\r q ", ["VAR", "AND", "VAR"]),
        ("∧ ∨", ["AND", "OR"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes canonical syntax."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_token_values_are_single_characters(self):
        """Test every token value is exactly the matched character."""
        values = [token.value for token in self.lexer.tokenize("a ↔ (b → ¬c)")]
        assert values == ["a", "↔", "(", "b", "→", "¬", "c", ")"]

    def test_every_lowercase_letter_is_a_variable(self):
        """Test the whole ASCII lowercase alphabet is accepted."""
        text = " ".join("abcdefghijklmnopqrstuvwxyz")
        assert self._tokenize_to_types(text) == ["VAR"] * 26

    def test_empty_input(self):
        """Test lexer behavior with empty input."""
        assert self._tokenize_to_types("") == [], "Empty input should produce no tokens"

    ILLEGAL_CHARACTERS = [
        "A",
        "P",
        "0",
        "7",
        "&",
        "|",
        "!",
        "~",
        "^",
        "=",
        ">",
        "<",
        "-",
        "+",
        "*",
        "[",
        "]",
        "{",
        "}",
        ",",
        ".",
        "_",
        "é",
        "⊕",
    ]

    @pytest.mark.parametrize("illegal_char", ILLEGAL_CHARACTERS)
    def test_illegal_character_handling(self, illegal_char):
        """Test lexer raises InvalidToken naming the illegal character."""
        test_input = f"p ∧ {illegal_char}"

        with pytest.raises(InvalidToken) as exc_info:
            self._tokenize_to_types(test_input)

        assert exc_info.value.token == illegal_char
        assert illegal_char in str(exc_info.value), (
            f"Expected illegal character '{illegal_char}' in error message, "
            f"got: {exc_info.value}"
        )

    def test_invalid_token_is_engine_error(self):
        """Test InvalidToken can be handled through the common base class."""
        with pytest.raises(EngineError):
            self._tokenize_to_types("p AND q")
