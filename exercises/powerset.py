# exercises/powerset.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Power set enumeration ordered by subset size

from itertools import chain, combinations
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def powerset(items: Sequence[T]) -> List[List[T]]:
    """Return every subset of ``items``, smallest first.

    Subsets of equal size keep the order of ``items``:

        >>> powerset([1, 2, 3])
        [[], [1], [2], [3], [1, 2], [1, 3], [2, 3], [1, 2, 3]]
    """
    items = list(items)
    sizes = range(len(items) + 1)
    return [list(subset) for subset in chain.from_iterable(combinations(items, k) for k in sizes)]
