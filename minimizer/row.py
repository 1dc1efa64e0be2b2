# minimizer/row.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Quine-McCluskey rows (implicants) over the active variables

"""Implicant rows for the Quine-McCluskey algorithm.

A row has one position per active variable (alphabetical order, so position
0 is the most significant bit of an assignment index). Each position is
``0``, ``1`` or ``-`` (don't care). A row also records the sorted indices of
the assignments (here: zero-rows of the truth table) it covers.

Example:
    >>> a = Row.from_index(2, 3)   # 010
    >>> b = Row.from_index(6, 3)   # 110
    >>> a.can_merge(b)
    True
    >>> str(a.merge(b))
    '-10'
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Bit(Enum):
    """Value of a row position."""

    FALSE = "0"
    TRUE = "1"
    DONT_CARE = "-"

    @classmethod
    def from_bool(cls, value: bool) -> Bit:
        return cls.TRUE if value else cls.FALSE

    @property
    def cost(self) -> int:
        """Literal cost of the position, used to break ties in Petrick's method."""
        return _BIT_COST[self]

    def __str__(self) -> str:
        return self.value


_BIT_COST = {Bit.DONT_CARE: 0, Bit.TRUE: 1, Bit.FALSE: 2}


@dataclass(frozen=True)
class Row:
    """One implicant of the Quine-McCluskey table.

    Attributes:
        values: Bit per active variable, most significant first
        ids: Sorted indices of the assignments covered by this row
    """

    values: Tuple[Bit, ...]
    ids: Tuple[int, ...]

    @classmethod
    def from_index(cls, index: int, width: int) -> Row:
        """Build the row of a single assignment index."""
        values = tuple(Bit.from_bool((index >> (width - i - 1)) & 1 == 1) for i in range(width))
        return cls(values, (index,))

    @property
    def width(self) -> int:
        return len(self.values)

    def _mask(self, bit: Bit) -> int:
        mask = 0
        for value in self.values:
            mask = (mask << 1) | (value is bit)
        return mask

    def care_mask(self) -> int:
        """Bitfield with a 1 at every position that is not a don't care."""
        return self._mask(Bit.FALSE) | self._mask(Bit.TRUE)

    def true_mask(self) -> int:
        """Bitfield with a 1 at every TRUE position."""
        return self._mask(Bit.TRUE)

    def diff(self, other: Row) -> int:
        """Bitfield of the care positions where the two rows disagree."""
        return self.true_mask() ^ other.true_mask()

    def can_merge(self, other: Row) -> bool:
        """Rows merge when they share a care mask and differ in one bit."""
        return self.care_mask() == other.care_mask() and bin(self.diff(other)).count("1") == 1

    def merge(self, other: Row) -> Row:
        """Combine two mergeable rows; the differing bit becomes don't care."""
        diff = self.diff(other)
        width = self.width
        values = tuple(
            Bit.DONT_CARE if (diff >> (width - i - 1)) & 1 else value
            for i, value in enumerate(self.values)
        )
        return Row(values, tuple(sorted(set(self.ids) | set(other.ids))))

    def covers(self, index: int) -> bool:
        return index in self.ids

    def literal_cost(self) -> int:
        return sum(value.cost for value in self.values)

    def literal_count(self) -> int:
        """Number of literals the row contributes as a clause."""
        return sum(1 for value in self.values if value is not Bit.DONT_CARE)

    def __str__(self) -> str:
        return "".join(str(value) for value in self.values)

    def __repr__(self) -> str:
        return f"Row({self}, {list(self.ids)})"
