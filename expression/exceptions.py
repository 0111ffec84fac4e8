# expression/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Custom exceptions for formula normalization, compilation and evaluation

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while turning formula text into a
truth table. All of them inherit from EngineError so that callers can refuse
to render a table with a single except clause, while still being able to
present a precise message for each failure kind.

None of these errors is fatal to the host process: every one of them is
recoverable by correcting the input formula.
"""


class EngineError(RuntimeError):
    """Base class for every error raised by the truth table engine.

    Used throughout the pipeline to provide consistent error handling. Stages
    raise a concrete subclass immediately and never attempt silent recovery.
    """

    pass


class NoVariablesFound(EngineError):
    """Raised when canonical formula text contains no propositional variable."""

    def __init__(self, formula: str = ""):
        self.formula = formula
        super().__init__("No variables found in the expression")


class InvalidToken(EngineError):
    """Raised when a character outside the formula alphabet is encountered.

    The alphabet is: lowercase letters, the five canonical operators,
    parentheses and whitespace.

    Attributes:
        token: The offending character
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid token: {token}")


class MismatchedParentheses(EngineError):
    """Raised when parentheses are unbalanced or incorrectly nested."""

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class InvalidExpression(EngineError):
    """Raised when a postfix sequence does not reduce to exactly one value.

    Covers operand underflow (an operator without enough operands) as well as
    leftover values (e.g. two adjacent variables with no operator between them,
    or an empty expression).
    """

    def __init__(self, message: str = "Invalid expression"):
        super().__init__(message)


class TooManyVariables(EngineError):
    """Raised when a formula exceeds the configured variable cap.

    Table size grows as 2^n, so the engine refuses formulas whose variable
    count is above the limit instead of blocking on the enumeration.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Configured maximum
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Expression uses {count} variables; the limit is {limit} "
            f"({2 ** count} rows requested)"
        )
