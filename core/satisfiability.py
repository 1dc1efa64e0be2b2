# core/satisfiability.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Brute-force satisfiability test

"""Satisfiability by exhaustive enumeration.

Assignments are visited in canonical truth-table order and the search stops
at the first one that makes the formula true. There is no pruning and no
clause learning; formulas are small enough for a full scan to be cheap.
"""

from typing import Dict, Optional, Union

from rpn import Tree, parse
from .truth_table import assignment_bits, iter_assignments
from utils.logger import get_logger


def find_model(tree: Tree) -> Optional[Dict[str, bool]]:
    """Return the first satisfying assignment, or None if there is none."""
    logger = get_logger()
    var_list = tree.var_list

    for index, result in iter_assignments(tree):
        if result:
            model = dict(zip(var_list, assignment_bits(index, len(var_list))))
            logger.debug(f"Satisfying assignment for {tree.root} at row {index}: {model}")
            return model

    logger.debug(f"No satisfying assignment for {tree.root}")
    return None


def satisfy(tree: Tree) -> bool:
    """Return True if some assignment makes the tree true."""
    return find_model(tree) is not None


def sat(formula: Union[str, Tree]) -> bool:
    """Parse (if needed) and test a formula for satisfiability.

    Raises:
        ParseError: The formula is malformed
    """
    tree = parse(formula) if isinstance(formula, str) else formula
    return satisfy(tree)
