# rpn/__init__.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Formula parsing components for RPN propositional formulas

"""RPN formula parsing into expression trees.

This package turns propositional formulas written in Reverse Polish Notation
into expression trees. A formula is a string over the alphabet
``0 1 A..Z ! & | ^ > =``; operators follow their operands.

Core Functions:
    parse: Converts a formula string into a Tree

Core Types:
    Tree: Root node plus the 26 shared variable cells
    Node: Literal together with its pending negation count
    Const, Var, Binary: The literal variants
    BinOp: Binary connectives (AND, OR, XOR, IMPL, LEQ)

Errors:
    ParseError and its subclasses InvalidCharacterError,
    MissingOperandError and UnbalancedExpressionError

Example:
    >>> from rpn import parse
    >>> tree = parse("AB&C|")
    >>> str(tree)
    'AB&C|'
"""

from .exceptions import (
    ParseError,
    InvalidCharacterError,
    MissingOperandError,
    UnbalancedExpressionError,
)
from .ast_nodes import (
    BinOp,
    Binary,
    Const,
    Node,
    Var,
    binary,
    build_left_assoc,
    const,
    iff,
    implies,
    var,
)
from .grammar import _RPNParser
from .tree import Tree, VariableCell, VariableTable
from utils.logger import get_logger


def parse(source: str) -> Tree:
    """Parse an RPN formula string into an expression tree.

    Uses a fresh parser instance for each invocation, so every tree gets its
    own variable table.

    Args:
        source: RPN formula string to parse

    Returns:
        Tree for the formula

    Raises:
        ParseError: Formula contains an invalid character, lacks an operand,
            or does not reduce to a single expression

    Example:
        >>> tree = parse("AB>")
        >>> tree.var_list
        ['A', 'B']
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _RPNParser()

    try:
        result = parser.parse(source)
        logger.debug(f"Formula parsed successfully, variables: {result.var_list}")
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise


__all__ = [
    "parse",
    "ParseError",
    "InvalidCharacterError",
    "MissingOperandError",
    "UnbalancedExpressionError",
    "BinOp",
    "Binary",
    "Const",
    "Node",
    "Var",
    "Tree",
    "VariableCell",
    "VariableTable",
    "binary",
    "build_left_assoc",
    "const",
    "iff",
    "implies",
    "var",
]

__version__ = "1.0.0"
__description__ = "RPN formula parsing components"
