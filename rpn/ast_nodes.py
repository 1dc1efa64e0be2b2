# rpn/ast_nodes.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Expression tree node classes for propositional formulas

"""Expression tree nodes for parsed RPN formulas.

This module defines the immutable, hashable classes used to build the tree
representation of a propositional formula, together with the fixed token
alphabet mapping wire characters to logical constructs.

Node Types:
    Const: Fixed truth value (0 or 1)
    Var: Reference to the variable cell of a single upper-case letter
    Binary: Operator node with an ordered tuple of child nodes
    Node: A literal together with a count of pending negations

Negation is not a node of its own. A Node carries a ``negations`` counter;
parsing ``!`` increments it, and only its parity is semantically observed.
All nodes support the visitor design pattern for traversal and rewriting.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol, Tuple


class BinOp(Enum):
    """Binary connectives and their RPN wire characters."""

    AND = "&"
    OR = "|"
    XOR = "^"
    IMPL = ">"
    LEQ = "="

    @classmethod
    def from_char(cls, char: str) -> BinOp:
        """Look up the operator encoded by ``char``.

        Raises:
            ValueError: ``char`` is not an operator character
        """
        return cls(char)

    @property
    def is_commutative(self) -> bool:
        return self is not BinOp.IMPL

    def __str__(self) -> str:
        return self.value


NEGATION_CHAR = "!"
CONSTANT_CHARS = "01"
VARIABLE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Each method receives the whole Node, so that visitors see the pending
    negation count together with the literal it applies to.
    """

    def visit_const(self, n: Node): ...

    def visit_var(self, n: Node): ...

    def visit_binary(self, n: Node): ...


@dataclass(frozen=True, slots=True)
class Literal:
    """Base class for the three literal variants."""

    def accept(self, v: Visitor, node: Node):
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Const(Literal):
    """Boolean constant.

    Attributes:
        value: The fixed truth value
    """

    value: bool

    def accept(self, v: Visitor, node: Node):
        return v.visit_const(node)

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True)
class Var(Literal):
    """Reference to a variable cell.

    The cell itself lives in the owning tree's variable table; every
    occurrence of the same letter resolves to the same cell.

    Attributes:
        name: Single upper-case letter identifying the cell
    """

    name: str

    def accept(self, v: Visitor, node: Node):
        return v.visit_var(node)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Binary(Literal):
    """Operator applied to an ordered sequence of operands.

    The parser always produces two children. Simplification may flatten
    nested And/Or nodes into a single n-ary node.

    Attributes:
        op: The binary connective
        children: Operands, left to right
    """

    op: BinOp
    children: Tuple[Node, ...]

    def __post_init__(self):
        children = tuple(self.children)
        if len(children) < 2:
            raise ValueError(
                f"Operator '{self.op}' needs at least two operands, got {len(children)}"
            )
        object.__setattr__(self, "children", children)

    def accept(self, v: Visitor, node: Node):
        return v.visit_binary(node)

    def __str__(self) -> str:
        operands = "".join(str(child) for child in self.children)
        return operands + str(self.op) * (len(self.children) - 1)


@dataclass(frozen=True, slots=True)
class Node:
    """A literal with its pending negations.

    Nodes overload ``&``, ``|``, ``^`` and ``~`` so that rewrite rules read
    like the algebra they implement. ``implies`` and ``iff`` build the two
    operators Python has no symbol for.

    Attributes:
        literal: The wrapped literal
        negations: Number of pending unary negations (parity is what counts)
    """

    literal: Literal
    negations: int = 0

    @property
    def is_negated(self) -> bool:
        return self.negations % 2 == 1

    @property
    def is_leaf(self) -> bool:
        return not isinstance(self.literal, Binary)

    def normalized(self) -> Node:
        """Return the same node with its negation counter reduced to parity."""
        if self.negations < 2:
            return self
        return Node(self.literal, self.negations % 2)

    def accept(self, v: Visitor):
        """Dispatch to the visitor method matching this node's literal."""
        return self.literal.accept(v, self)

    def __and__(self, other: Node) -> Node:
        return binary(BinOp.AND, self, other)

    def __or__(self, other: Node) -> Node:
        return binary(BinOp.OR, self, other)

    def __xor__(self, other: Node) -> Node:
        return binary(BinOp.XOR, self, other)

    def __invert__(self) -> Node:
        return Node(self.literal, self.negations + 1)

    def __str__(self) -> str:
        return str(self.literal) + NEGATION_CHAR * self.negations


def const(value: bool) -> Node:
    return Node(Const(bool(value)))


def var(name: str) -> Node:
    return Node(Var(name))


def binary(op: BinOp, *children: Node) -> Node:
    return Node(Binary(op, tuple(children)))


def implies(left: Node, right: Node) -> Node:
    return binary(BinOp.IMPL, left, right)


def iff(left: Node, right: Node) -> Node:
    return binary(BinOp.LEQ, left, right)


def build_left_assoc(op: BinOp, operands: Iterable[Node], empty: bool) -> Node:
    """Build a left-associated chain of binary nodes.

    Args:
        op: Connective joining the operands
        operands: Operands, left to right
        empty: Truth value returned when there are no operands

    Returns:
        ``((o1 op o2) op o3) ...``, the single operand, or ``const(empty)``
    """
    operands = list(operands)
    if not operands:
        return const(empty)

    expr = operands[0]
    for operand in operands[1:]:
        expr = binary(op, expr, operand)
    return expr


def iter_variables(node: Node):
    """Yield every variable name occurring under ``node``, in tree order."""
    stack = [node]
    while stack:
        current = stack.pop()
        literal = current.literal
        if isinstance(literal, Var):
            yield literal.name
        elif isinstance(literal, Binary):
            stack.extend(reversed(literal.children))
