# exercises/bitwise.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Integer arithmetic built from bitwise operations only

"""Unsigned 32-bit arithmetic with bitwise operations only.

``adder`` and ``multiplier`` never use ``+`` or ``*`` on the operands: the
sum is computed by XOR with carry propagation, the product by shift-and-add
over ``adder``. Results wrap modulo ``2**32`` like unsigned machine words.
"""

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1


def _check_word(name: str, value: int) -> int:
    if not 0 <= value <= WORD_MASK:
        raise ValueError(f"{name} must be an unsigned {WORD_BITS}-bit integer, got {value}")
    return value


def adder(a: int, b: int) -> int:
    """Return ``(a + b) mod 2**32``.

    Raises:
        ValueError: An operand is outside the unsigned 32-bit range
    """
    total = _check_word("a", a) ^ _check_word("b", b)
    carry = ((a & b) << 1) & WORD_MASK
    while carry:
        total, carry = total ^ carry, ((total & carry) << 1) & WORD_MASK
    return total


def multiplier(a: int, b: int) -> int:
    """Return ``(a * b) mod 2**32`` by shift-and-add.

    Raises:
        ValueError: An operand is outside the unsigned 32-bit range
    """
    multiplicand = _check_word("a", a)
    factor = _check_word("b", b)

    result = 0
    while factor and multiplicand:
        if factor & 1:
            result = adder(result, multiplicand)
        factor >>= 1
        multiplicand = (multiplicand << 1) & WORD_MASK
    return result


def gray_code(n: int) -> int:
    """Return the reflected binary Gray code of ``n``."""
    _check_word("n", n)
    return n ^ (n >> 1)
