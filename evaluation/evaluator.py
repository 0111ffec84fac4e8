# evaluation/evaluator.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Stack machine evaluating postfix formulas under one assignment

"""Postfix evaluator.

A single stack of booleans is threaded through the token sequence:

- a variable pushes its assigned value
- ``¬`` pops one operand and pushes its negation
- a binary operator pops the right operand first, then the left one, and
  pushes the combined value

The sequence is well formed iff exactly one value remains at the end.
"""

from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping

from expression.exceptions import InvalidExpression
from expression.symbols import NOT, AND, OR, IMPLIES, IFF, is_variable

BinaryOperation = Callable[[bool, bool], bool]

BINARY_OPERATIONS: Mapping[str, BinaryOperation] = MappingProxyType(
    {
        AND: lambda left, right: left and right,
        OR: lambda left, right: left or right,
        # Material implication: vacuously true when the antecedent is false
        IMPLIES: lambda left, right: (not left) or right,
        IFF: lambda left, right: left == right,
    }
)


def evaluate(postfix: Iterable[str], assignment: Mapping[str, bool]) -> bool:
    """Evaluate a postfix token sequence against one variable assignment.

    Args:
        postfix: Postfix tokens (a PostfixExpression or any iterable of tokens)
        assignment: Boolean value for every variable used by the formula

    Returns:
        Truth value of the formula under the assignment

    Raises:
        InvalidExpression: Operand underflow, leftover operands, an empty
            sequence or an unknown token
        KeyError: The assignment has no value for a variable in the sequence
    """
    stack: List[bool] = []

    for token in postfix:
        if is_variable(token):
            if token not in assignment:
                raise KeyError(f"No value assigned to variable '{token}'")
            stack.append(bool(assignment[token]))

        elif token == NOT:
            if not stack:
                raise InvalidExpression(f"Invalid expression: '{NOT}' has no operand")
            stack.append(not stack.pop())

        elif token in BINARY_OPERATIONS:
            if len(stack) < 2:
                raise InvalidExpression(
                    f"Invalid expression: '{token}' needs two operands"
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(BINARY_OPERATIONS[token](left, right))

        else:
            raise InvalidExpression(f"Invalid expression: unknown token '{token}'")

    if len(stack) != 1:
        raise InvalidExpression(
            f"Invalid expression: {len(stack)} values left after evaluation"
        )

    return stack[0]
