# minimizer/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Minimum CNF by Quine-McCluskey and Petrick's method

"""Minimization of formulas into a minimum-size Conjunctive Normal Form.

The pipeline:
1. Build the truth table in canonical order.
2. Take the zero-rows (assignments making the formula false).
3. Compute the prime implicants of the zero-set (Quine-McCluskey).
4. Keep the essential primes.
5. Cover what remains with Petrick's method.
6. Emit one clause per chosen prime: a FALSE position becomes the positive
   variable, a TRUE position its negation, a don't care nothing.

Literals in a clause follow variable order; clauses are ordered by their
sequence of (variable, polarity) pairs. Both the clauses and the
conjunction are left-associated. A formula that is never false minimizes to
``1``, one that is always false to ``0``.

Example:
    >>> conjunctive_normal_form("AB&!")
    'A!B!|'
"""

from typing import List, Sequence, Union

from rpn import BinOp, Node, Tree, build_left_assoc, const, parse, var
from core.truth_table import TruthTable, build_truth_table
from .row import Bit, Row
from .quine_mccluskey import essential_prime_implicants, prime_implicants, zero_rows
from .petrick import PetricksMethod, absorb
from utils.logger import get_logger


def _clause_key(row: Row):
    return tuple(
        (position, value is Bit.TRUE)
        for position, value in enumerate(row.values)
        if value is not Bit.DONT_CARE
    )


def emit_cnf(rows: Sequence[Row], variables: Sequence[str]) -> Node:
    """Turn a cover of the zero-set into a CNF node."""
    clauses = []
    for row in sorted(rows, key=_clause_key):
        literals = []
        for name, value in zip(variables, row.values):
            if value is Bit.FALSE:
                literals.append(var(name))
            elif value is Bit.TRUE:
                literals.append(~var(name))
        clauses.append(build_left_assoc(BinOp.OR, literals, False))
    return build_left_assoc(BinOp.AND, clauses, True)


def minimum_cover(table: TruthTable) -> List[Row]:
    """Return the chosen implicants of the zero-set of a truth table."""
    rows = zero_rows(table)

    primes = prime_implicants(rows)
    essentials, uncovered = essential_prime_implicants(primes, table.false_rows())
    remaining = [prime for prime in primes if prime not in essentials]

    return essentials + PetricksMethod(remaining, uncovered).select()


def minimize(tree: Tree) -> Tree:
    """Minimize a tree into a minimum-size CNF.

    Args:
        tree: Parsed formula

    Returns:
        New tree (with a copy of the variable cells) holding the CNF
    """
    logger = get_logger()
    logger.debug(f"Minimizing {tree.root}")

    table = build_truth_table(tree)
    false_rows = table.false_rows()

    if not false_rows:
        root = const(True)
    elif len(false_rows) == len(table):
        root = const(False)
    else:
        root = emit_cnf(minimum_cover(table), table.variables)

    result = tree.derive(root)
    logger.stage_result("minimize", str(result))
    return result


def conjunctive_normal_form(formula: Union[str, Tree]) -> str:
    """Return the minimum CNF of a formula as an RPN string.

    Raises:
        ParseError: The formula is malformed
    """
    tree = parse(formula) if isinstance(formula, str) else formula
    return str(minimize(tree).root)


def literal_count(node: Node) -> int:
    """Count the leaf occurrences (variables and constants) of a node."""
    if node.is_leaf:
        return 1
    return sum(literal_count(child) for child in node.literal.children)


__all__ = [
    "Bit",
    "Row",
    "PetricksMethod",
    "absorb",
    "conjunctive_normal_form",
    "emit_cnf",
    "essential_prime_implicants",
    "literal_count",
    "minimize",
    "minimum_cover",
    "prime_implicants",
    "zero_rows",
]

__version__ = "1.0.0"
__description__ = "CNF minimization for RPN formulas"
