# expression/compiler.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Infix to postfix compilation using the shunting-yard algorithm

"""Shunting-yard compiler for canonical propositional formulas.

Converts canonical infix text into a Reverse Polish token sequence that the
stack evaluator can run without parentheses.

Resolution rules:
- Variables go straight to the output.
- An incoming operator first pops every stacked operator (down to the nearest
  open parenthesis) whose precedence is greater than or equal to its own.
  This applies uniformly, so → and ↔ associate to the left, and a ¬ directly
  following another ¬ pops it.
- ``)`` pops until the matching ``(``, which is discarded.
- Unbalanced parentheses in either direction raise MismatchedParentheses.

The compiler does not check operator arity: ``p ∧ ∧ q`` compiles, and the
evaluator reports it.
"""

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from .lexer import FormulaLexer
from .symbols import PRECEDENCE, LPAREN, PostfixExpression
from .exceptions import MismatchedParentheses
from utils.logger import get_logger


class _ShuntingYardCompiler:
    """Operator-precedence compiler from canonical infix to postfix.

    Attributes:
        precedence: Read-only operator precedence table (higher binds tighter)
    """

    def __init__(self, precedence: Mapping[str, int] = PRECEDENCE):
        self.precedence = precedence

    def compile(self, text: str) -> PostfixExpression:
        """Compile canonical formula text into postfix order.

        Args:
            text: Canonical symbolic formula

        Returns:
            Immutable postfix token sequence

        Raises:
            InvalidToken: Text contains a character outside the formula alphabet
            MismatchedParentheses: Parentheses are unbalanced
        """
        output: List[str] = []
        operators: List[str] = []

        for token in FormulaLexer().tokenize(text):
            if token.type == "VAR":
                output.append(token.value)

            elif token.type == "LPAREN":
                operators.append(token.value)

            elif token.type == "RPAREN":
                while operators and operators[-1] != LPAREN:
                    output.append(operators.pop())
                if not operators:
                    raise MismatchedParentheses("Mismatched parentheses: unexpected ')'")
                operators.pop()

            else:
                self._push_operator(token.value, operators, output)

        while operators:
            operator = operators.pop()
            if operator == LPAREN:
                raise MismatchedParentheses("Mismatched parentheses: unclosed '('")
            output.append(operator)

        return PostfixExpression(tuple(output))

    def _push_operator(self, operator: str, operators: List[str], output: List[str]):
        incoming = self.precedence[operator]
        while (
            operators
            and operators[-1] != LPAREN
            and self.precedence[operators[-1]] >= incoming
        ):
            output.append(operators.pop())
        operators.append(operator)


def infix_to_postfix(text: str) -> PostfixExpression:
    """Compile canonical text with the default precedence table."""
    postfix = _ShuntingYardCompiler().compile(text)
    get_logger().postfix_compiled(text, str(postfix))
    return postfix


@dataclass(frozen=True, slots=True)
class CompiledFormula:
    """Everything derived from one formula text ahead of evaluation.

    Attributes:
        source: Formula text exactly as supplied
        canonical: Canonical symbolic text
        variables: Sorted variable set of the canonical text
        postfix: Compiled postfix sequence
    """

    source: str
    canonical: str
    variables: Tuple[str, ...]
    postfix: PostfixExpression
