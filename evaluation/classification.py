# evaluation/classification.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Semantic classification of a formula from its truth table output column

from enum import Enum, auto
from typing import Iterable

from utils.logger import get_logger


class FormulaClass(Enum):
    """Semantic status of a propositional formula.

    Values:
        TAUTOLOGY: True under every assignment
        CONTINGENCY: True under some assignments and false under others
        CONTRADICTION: False under every assignment
    """

    TAUTOLOGY = auto()
    CONTINGENCY = auto()
    CONTRADICTION = auto()

    def __str__(self) -> str:
        return self.name

    def is_satisfiable(self) -> bool:
        """Return True if at least one assignment makes the formula true."""
        return self is not FormulaClass.CONTRADICTION

    def is_valid(self) -> bool:
        """Return True if the formula holds under every assignment."""
        return self is FormulaClass.TAUTOLOGY


def classify(outputs: Iterable[bool]) -> FormulaClass:
    """Classify a formula from its output column.

    Args:
        outputs: Output value of every truth table row

    Returns:
        FormulaClass of the column

    Raises:
        ValueError: The column is empty
    """
    values = list(outputs)
    if not values:
        raise ValueError("Cannot classify an empty output column")

    if all(values):
        result = FormulaClass.TAUTOLOGY
    elif any(values):
        result = FormulaClass.CONTINGENCY
    else:
        result = FormulaClass.CONTRADICTION

    get_logger().debug(f"Output column of {len(values)} rows classified as {result}")
    return result
