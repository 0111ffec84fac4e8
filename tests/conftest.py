# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Tabula test suite.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the engine packages are importable before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import evaluation
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def symbolic_formula():
    """Reference formula in symbolic notation.

    Returns:
        str: Three-variable formula mixing all precedence levels up to OR
    """
    return "p ∧ (q ∨ ¬r)"


@pytest.fixture
def word_formula():
    """The reference formula written in word notation.

    Returns:
        str: Word notation equivalent of symbolic_formula
    """
    return "p AND (q OR NOT r)"


@pytest.fixture
def expected_reference_outputs():
    """Output column of the reference formula in big-endian row order.

    Returns:
        list[bool]: 8 outputs for rows (p, q, r) = FFF .. TTT
    """
    return [False, False, False, False, True, False, True, True]
