# rewrite/simplifier.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Bottom-up algebraic simplification of expression trees

"""Algebraic simplification of expression trees.

The simplifier rebuilds the tree bottom-up, applying at every Binary node:

Constant folding:
    x & 0 = 0    x & 1 = x    x | 0 = x    x | 1 = 1
    x ^ 0 = x    x ^ 1 = !x   x = 1 = x    x = 0 = !x
    x > 1 = 1    0 > x = 1    1 > x = x    x > 0 = !x

Structural equality:
    x & x = x    x | x = x    x ^ x = 0    x = x = 1    x > x = 1

Contradiction and tautology:
    x & !x = 0   x | !x = 1   x ^ !x = 1   x = !x = 0   x > !x = !x

Associative flattening:
    non-negated And (Or) operands of an And (Or) node are spliced into it,
    producing n-ary nodes.

Structural comparison ignores operand order under commutative operators.
Xor, Impl and Leq are handled as binary operators; wider nodes are
reassociated to the left first.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Tuple

from rpn import ast_nodes as ast
from rpn.ast_nodes import Binary, BinOp, Const, Node
from rpn.tree import Tree
from .nnf_transformer import binary_operands
from utils.logger import get_logger


class NodeRelation(Enum):
    """Structural relation between two nodes."""

    EQUAL = "equal"
    OPPOSITE = "opposite"
    UNRELATED = "unrelated"


def canonical_key(literal, cache: Optional[Dict] = None) -> Tuple:
    """Return an order-insensitive structural key for a literal.

    Keys of Binary literals are stored in ``cache`` when one is given.
    """
    if isinstance(literal, Const):
        return ("c", literal.value)
    if not isinstance(literal, Binary):
        return ("v", literal.name)

    if cache is not None and literal in cache:
        return cache[literal]

    keys = [(child.negations % 2, canonical_key(child.literal, cache)) for child in literal.children]
    if literal.op.is_commutative:
        keys.sort()
    key = ("b", literal.op.value, tuple(keys))

    if cache is not None:
        cache[literal] = key
    return key


def compare(left: Node, right: Node, cache: Optional[Dict] = None) -> NodeRelation:
    """Compare two nodes up to operand order and double negation."""
    if canonical_key(left.literal, cache) != canonical_key(right.literal, cache):
        return NodeRelation.UNRELATED
    if left.is_negated == right.is_negated:
        return NodeRelation.EQUAL
    return NodeRelation.OPPOSITE


def negate(node: Node) -> Node:
    """Negate a node, folding constants and double negations."""
    if isinstance(node.literal, Const):
        return ast.const(node.literal.value == node.is_negated)
    return (~node).normalized()


def const_value(node: Node):
    """Return the truth value of a constant node, or None for other nodes."""
    if isinstance(node.literal, Const):
        return node.literal.value != node.is_negated
    return None


class Simplifier:
    """Bottom-up simplifier for expression trees.

    Attributes:
        _memo: Cache of already simplified subtrees
        _keys: Structural keys of the Binary literals compared so far
    """

    def __init__(self):
        self._memo: Dict[Node, Node] = {}
        self._keys: Dict[Binary, Tuple] = {}

    def transform(self, root: Node) -> Node:
        logger = get_logger()
        logger.debug(f"Starting simplification of {root}")

        self._memo.clear()
        self._keys.clear()
        result = self._visit(root)

        logger.debug(f"Simplification complete: {result}")
        return result

    def _visit(self, node: Node) -> Node:
        node = node.normalized()
        if node in self._memo:
            return self._memo[node]

        result = node.accept(self)
        self._memo[node] = result
        return result

    def visit_const(self, n: Node) -> Node:
        return ast.const(n.literal.value != n.is_negated)

    def visit_var(self, n: Node) -> Node:
        return n.normalized()

    def visit_binary(self, n: Node) -> Node:
        op = n.literal.op

        if op is BinOp.AND or op is BinOp.OR:
            operands = [self._visit(child) for child in n.literal.children]
            result = self._join(op, operands)
        else:
            left, right = binary_operands(n)
            left, right = self._visit(left), self._visit(right)
            if op is BinOp.XOR:
                result = self._xor(left, right)
            elif op is BinOp.IMPL:
                result = self._impl(left, right)
            else:
                result = self._leq(left, right)

        return negate(result) if n.is_negated else result

    def _join(self, op: BinOp, operands: List[Node]) -> Node:
        """Flatten, fold and deduplicate the operands of an And or Or node."""
        absorbing = op is BinOp.OR

        flat: List[Node] = []
        for operand in operands:
            if not operand.is_leaf and not operand.is_negated and operand.literal.op is op:
                flat.extend(operand.literal.children)
            else:
                flat.append(operand)

        kept: List[Node] = []
        for operand in flat:
            value = const_value(operand)
            if value is not None:
                if value == absorbing:
                    return ast.const(absorbing)
                continue

            duplicate = False
            for seen in kept:
                relation = compare(seen, operand, self._keys)
                if relation is NodeRelation.OPPOSITE:
                    return ast.const(absorbing)
                if relation is NodeRelation.EQUAL:
                    duplicate = True
                    break
            if not duplicate:
                kept.append(operand)

        if not kept:
            return ast.const(not absorbing)
        if len(kept) == 1:
            return kept[0]
        return ast.binary(op, *kept)

    def _xor(self, left: Node, right: Node) -> Node:
        for constant, other in ((left, right), (right, left)):
            value = const_value(constant)
            if value is not None:
                return negate(other) if value else other

        relation = compare(left, right, self._keys)
        if relation is NodeRelation.EQUAL:
            return ast.const(False)
        if relation is NodeRelation.OPPOSITE:
            return ast.const(True)
        return left ^ right

    def _leq(self, left: Node, right: Node) -> Node:
        for constant, other in ((left, right), (right, left)):
            value = const_value(constant)
            if value is not None:
                return other if value else negate(other)

        relation = compare(left, right, self._keys)
        if relation is NodeRelation.EQUAL:
            return ast.const(True)
        if relation is NodeRelation.OPPOSITE:
            return ast.const(False)
        return ast.iff(left, right)

    def _impl(self, left: Node, right: Node) -> Node:
        antecedent = const_value(left)
        consequent = const_value(right)

        if consequent is True or antecedent is False:
            return ast.const(True)
        if antecedent is True:
            return right
        if consequent is False:
            return negate(left)

        relation = compare(left, right, self._keys)
        if relation is NodeRelation.EQUAL:
            return ast.const(True)
        if relation is NodeRelation.OPPOSITE:
            return right
        return ast.implies(left, right)


def simplify(tree: Tree) -> Tree:
    """Simplify a tree.

    Args:
        tree: Parsed formula

    Returns:
        New tree (with a copy of the variable cells) holding the simplified,
        equivalent formula
    """
    logger = get_logger()
    result = tree.derive(Simplifier().transform(tree.root))
    logger.stage_result("simplify", str(result))
    return result
