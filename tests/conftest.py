# tests/conftest.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Boole test suite.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures: representative formulas and a seeded random source
"""

import sys
import random
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# Formulas exercising every connective, negation parity and constants
SAMPLE_FORMULAS = [
    "A",
    "A!",
    "A!!",
    "1",
    "0!",
    "AB&",
    "AB|",
    "AB^",
    "AB>",
    "AB=",
    "AB&!",
    "AB|!",
    "AB^!",
    "AB>!",
    "AB=!",
    "AB|C&",
    "ABC&|",
    "AB>C>",
    "AB=C=D=",
    "AB&C!|D^",
    "AA!&",
    "AA!|",
    "A1&B0|>",
    "ABCD&|&",
    "AB!C&|D!E^=",
]


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import rpn
        import core
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Create the global logger before any test swaps the standard streams
    utils.get_logger()

    yield


@pytest.fixture
def sample_formulas():
    """Provide the shared list of representative formulas.

    Returns:
        List[str]: Well-formed RPN formulas
    """
    return list(SAMPLE_FORMULAS)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic random source for generator tests.

    Returns:
        random.Random: Seeded pseudo-random generator
    """
    return random.Random(1234)
