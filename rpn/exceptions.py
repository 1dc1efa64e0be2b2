# rpn/exceptions.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for RPN formula parsing.

This module defines the errors that can be raised while turning an RPN string
into an expression tree. Every parse failure is reported exactly once, as one
of the three concrete subclasses of ParseError, and bubbles up to the caller
unchanged.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class of every parse failure. Callers that do not care about the
    precise reason can catch this class alone.
    """

    pass


class InvalidCharacterError(ParseError):
    """A character outside the accepted RPN alphabet was encountered.

    Attributes:
        character: The offending character
        position: Zero-based index of the character in the input, if known
    """

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid character '{character}'{where}")


class MissingOperandError(ParseError):
    """An operator was applied with too few operands on the stack."""

    def __init__(self, operator: Optional[str] = None):
        self.operator = operator
        detail = f" for operator '{operator}'" if operator else ""
        super().__init__(f"Missing operand{detail}")


class UnbalancedExpressionError(ParseError):
    """The input did not reduce to exactly one expression."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            f"Unbalanced expression: {remaining} operand(s) left on the stack"
        )
