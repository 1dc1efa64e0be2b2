# core/set_evaluator.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Set-theoretic evaluation of formulas

"""Evaluation of formulas over sets of integers.

Each variable is bound to a finite set of integers and the connectives are
read as set operations. The universe is implicit: it is the union of every
integer appearing in a bound set. Complements are therefore kept symbolic
while evaluating, as *signed* sets:

    SignedSet(V, positive=True)   the enumerated set V
    SignedSet(V, positive=False)  the complement of V in the universe

Only the final result is materialized, as a sorted list without duplicates.

Operator semantics:
    A | B   union
    A & B   intersection
    !A      complement (flip the sign)
    A ^ B   (A | B) - (A & B)
    A > B   !A | B
    A = B   (A & B) | (!A & !B)

Constants read as the universe (1) and the empty set (0).
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, FrozenSet, Iterable, List, Sequence, Union

from rpn import BinOp, Node, Tree, parse
from rpn.tree import VariableTable
from utils.logger import get_logger


class SetEvaluationError(ValueError):
    """Raised when the sets supplied do not fit the formula."""

    pass


@dataclass(frozen=True)
class SignedSet:
    """A finite set or the complement of one.

    Attributes:
        values: The enumerated members (or non-members when negative)
        positive: True for ``values`` itself, False for its complement
    """

    values: FrozenSet[int]
    positive: bool = True

    @classmethod
    def of(cls, values: Iterable[int]) -> SignedSet:
        return cls(frozenset(values), True)

    @classmethod
    def complement_of(cls, values: Iterable[int]) -> SignedSet:
        return cls(frozenset(values), False)

    def __or__(self, other: SignedSet) -> SignedSet:
        if self.positive and other.positive:
            return SignedSet(self.values | other.values, True)
        if not self.positive and not other.positive:
            return SignedSet(self.values & other.values, False)
        positive, negative = (self, other) if self.positive else (other, self)
        return SignedSet(negative.values - positive.values, False)

    def __and__(self, other: SignedSet) -> SignedSet:
        if self.positive and other.positive:
            return SignedSet(self.values & other.values, True)
        if not self.positive and not other.positive:
            return SignedSet(self.values | other.values, False)
        positive, negative = (self, other) if self.positive else (other, self)
        return SignedSet(positive.values - negative.values, True)

    def __invert__(self) -> SignedSet:
        return SignedSet(self.values, not self.positive)

    def __sub__(self, other: SignedSet) -> SignedSet:
        return self & ~other

    def __xor__(self, other: SignedSet) -> SignedSet:
        return (self | other) - (self & other)

    def implies(self, other: SignedSet) -> SignedSet:
        return ~self | other

    def iff(self, other: SignedSet) -> SignedSet:
        return (self & other) | (~self & ~other)

    def materialize(self, universe: Iterable[int]) -> List[int]:
        """Enumerate the members within ``universe``, sorted."""
        if self.positive:
            return sorted(self.values)
        return sorted(set(universe) - self.values)


SET_OPERATORS: Dict[BinOp, Callable[[SignedSet, SignedSet], SignedSet]] = {
    BinOp.AND: lambda left, right: left & right,
    BinOp.OR: lambda left, right: left | right,
    BinOp.XOR: lambda left, right: left ^ right,
    BinOp.IMPL: lambda left, right: left.implies(right),
    BinOp.LEQ: lambda left, right: left.iff(right),
}

EMPTY = SignedSet(frozenset(), True)
UNIVERSE = SignedSet(frozenset(), False)


class SetEvaluator:
    """Visitor computing the signed set denoted by a node.

    Variable cells hold sequences of integers; a cell holding anything else
    (such as the default ``False``) counts as the empty set.
    """

    def __init__(self, variables: VariableTable):
        self.variables = variables

    def evaluate(self, node: Node) -> SignedSet:
        return node.accept(self)

    def _signed(self, n: Node, result: SignedSet) -> SignedSet:
        return ~result if n.is_negated else result

    def visit_const(self, n: Node) -> SignedSet:
        return self._signed(n, UNIVERSE if n.literal.value else EMPTY)

    def visit_var(self, n: Node) -> SignedSet:
        value = self.variables[n.literal.name]
        members = value if isinstance(value, (list, tuple, set, frozenset)) else ()
        return self._signed(n, SignedSet.of(members))

    def visit_binary(self, n: Node) -> SignedSet:
        operator = SET_OPERATORS[n.literal.op]
        operands = [child.accept(self) for child in n.literal.children]
        return self._signed(n, reduce(operator, operands))


def bind_sets(tree: Tree, sets: Sequence[Iterable[int]]) -> List[int]:
    """Assign one set per variable, in alphabetical variable order.

    Variables left without a set are bound to the empty set.

    Returns:
        The universe: every integer appearing in a bound set, sorted

    Raises:
        SetEvaluationError: More sets than the formula has variables
    """
    var_list = tree.var_list
    if len(sets) > len(var_list):
        raise SetEvaluationError(
            f"Got {len(sets)} sets for {len(var_list)} variable(s) "
            f"({''.join(var_list) or 'none'})"
        )

    universe = set()
    for position, name in enumerate(var_list):
        members = sorted(set(sets[position])) if position < len(sets) else []
        tree.set_var(name, members)
        universe.update(members)
    return sorted(universe)


def set_evaluate(tree: Tree, universe: Iterable[int]) -> List[int]:
    """Evaluate a tree whose cells already hold sets."""
    return SetEvaluator(tree.variables).evaluate(tree.root).materialize(universe)


def eval_set(formula: Union[str, Tree], sets: Sequence[Iterable[int]]) -> List[int]:
    """Evaluate a formula over sets.

    Args:
        formula: RPN formula or parsed tree
        sets: One collection of integers per variable, alphabetical order

    Returns:
        Sorted, deduplicated members of the resulting set

    Raises:
        ParseError: The formula is malformed
        SetEvaluationError: More sets than variables
    """
    logger = get_logger()
    tree = parse(formula) if isinstance(formula, str) else formula

    universe = bind_sets(tree, sets)
    result = set_evaluate(tree, universe)

    logger.debug(f"Set evaluation of {tree.root} over universe {universe}: {result}")
    return result
