# exercises/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Small numeric companions of the formula engine

"""Bitwise arithmetic, Gray code and power set helpers.

Example:
    >>> from exercises import adder, multiplier
    >>> adder(27, 15), multiplier(6, 7)
    (42, 42)
"""

from .bitwise import WORD_MASK, adder, gray_code, multiplier
from .powerset import powerset

__all__ = ["WORD_MASK", "adder", "gray_code", "multiplier", "powerset"]
