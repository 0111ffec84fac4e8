# expression/variables.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Propositional variable extraction from canonical formula text

"""Variable extractor.

Collects every single lowercase ASCII letter appearing in canonical text.
The result is sorted so that truth table columns come out in a deterministic
order. Must only be applied to symbolic text: in word notation the letters of
``AND``/``OR`` would be picked up as variables.
"""

from typing import Tuple

from .symbols import VARIABLE_ALPHABET
from utils.logger import get_logger


def extract_variables(canonical: str) -> Tuple[str, ...]:
    """Return the sorted, deduplicated variables used in a canonical formula.

    An empty result is not an error here; the table generator reports it as
    NoVariablesFound.

    Args:
        canonical: Formula in canonical symbolic notation

    Returns:
        Tuple of single-letter variable names in lexicographic order
    """
    found = set()
    for char in canonical:
        if char in VARIABLE_ALPHABET:
            found.add(char)

    variables = tuple(sorted(found))
    get_logger().variables_extracted(canonical, variables)
    return variables
