# minimizer/quine_mccluskey.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Prime and essential implicants by the Quine-McCluskey algorithm

"""Quine-McCluskey implicant computation over the zero-rows of a formula.

Working on the assignments that make the formula *false* yields the clauses
of a CNF directly: every implicant of the zero-set becomes one disjunction.

The algorithm:
1. Start from one row per zero-row index.
2. Merge every pair of rows sharing a care mask and differing in exactly one
   care bit; the differing bit becomes don't care and the covered indices
   are unioned. Rows that never merge in a round are prime.
3. Repeat with the merged rows until no merge is possible.
4. A prime is essential when it is the only prime covering some index.
"""

from typing import Dict, Iterable, List, Sequence, Set, Tuple

from core.truth_table import TruthTable
from .row import Bit, Row
from utils.logger import get_logger


def zero_rows(table: TruthTable) -> List[Row]:
    """Return one row per assignment that makes the formula false."""
    return [Row.from_index(index, table.width) for index in table.false_rows()]


def _unique(rows: Iterable[Row]) -> List[Row]:
    """Drop rows with the same bit pattern, keeping first occurrences."""
    seen: Dict[Tuple[Bit, ...], Row] = {}
    for row in rows:
        seen.setdefault(row.values, row)
    return list(seen.values())


def prime_implicants(rows: Sequence[Row]) -> List[Row]:
    """Compute the prime implicants of a set of rows.

    Args:
        rows: Initial single-index rows

    Returns:
        Distinct prime implicants, in order of discovery
    """
    logger = get_logger()

    current = _unique(rows)
    primes: List[Row] = []
    round_number = 0

    while current:
        round_number += 1
        merged: Dict[Tuple[Bit, ...], Row] = {}
        used: Set[int] = set()

        for i, left in enumerate(current):
            for j in range(i + 1, len(current)):
                right = current[j]
                if left.can_merge(right):
                    combined = left.merge(right)
                    merged.setdefault(combined.values, combined)
                    used.update((i, j))

        primes.extend(row for index, row in enumerate(current) if index not in used)
        current = list(merged.values())

        if current:
            logger.rows(f"round {round_number} merged", current)

    primes = _unique(primes)
    logger.rows("prime implicants", primes)
    return primes


def essential_prime_implicants(
    primes: Sequence[Row], indices: Iterable[int]
) -> Tuple[List[Row], List[int]]:
    """Split off the primes that are the sole cover of some index.

    Args:
        primes: Prime implicants
        indices: Assignment indices to cover

    Returns:
        ``(essentials, uncovered)``: the essential primes (in prime order)
        and the indices they leave uncovered

    Raises:
        RuntimeError: Some index is covered by no prime at all
    """
    logger = get_logger()

    indices = list(indices)
    essential_positions: Set[int] = set()
    for index in indices:
        covering = [position for position, prime in enumerate(primes) if prime.covers(index)]
        if not covering:
            raise RuntimeError(f"Index {index} is not covered by any prime implicant")
        if len(covering) == 1:
            essential_positions.add(covering[0])

    essentials = [prime for position, prime in enumerate(primes) if position in essential_positions]
    uncovered = [index for index in indices if not any(p.covers(index) for p in essentials)]

    logger.rows("essential prime implicants", essentials)
    logger.debug(f"    indices left for Petrick's method: {uncovered}")
    return essentials, uncovered
