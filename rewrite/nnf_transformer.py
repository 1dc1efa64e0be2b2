# rewrite/nnf_transformer.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Expression tree transformer for Negation Normal Form conversion

"""Transforms expression trees into Negation Normal Form (NNF).

A formula in NNF contains only conjunctions, disjunctions and leaves, where a
leaf is a constant, a variable or a negated variable. Pending negations are
pushed down to the variables; negated constants are folded into constants.

Rewrite rules:
    A ^ B    ->  (A & !B) | (!A & B)
    A > B    ->  !A | B
    A = B    ->  (A & B) | (!A & !B)
    !(A & B) ->  !A | !B
    !(A | B) ->  !A & !B
    !(A ^ B) ->  (A & B) | (!A & !B)
    !(A > B) ->  A & !B
    !(A = B) ->  (A & !B) | (!A & B)
    !!A      ->  A

Xor, Impl and Leq nodes with more than two operands are reassociated to the
left before they are rewritten.
"""

from __future__ import annotations
from typing import Dict, Tuple

from rpn import ast_nodes as ast
from rpn.ast_nodes import BinOp, Node
from rpn.tree import Tree
from utils.logger import get_logger


class NNFTransformer:
    """Rewrites an expression tree into Negation Normal Form.

    Negation is propagated by visiting ``~child`` instead of ``child``: the
    negation counter then carries the pending negation down to the leaves.

    Attributes:
        _memo: Cache of already transformed (normalized) subtrees
    """

    def __init__(self):
        """Initialize transformer with empty memoization cache."""
        self._memo: Dict[Node, Node] = {}

    def transform(self, root: Node) -> Node:
        """Transform a node into NNF.

        Args:
            root: Root node of the expression to transform

        Returns:
            Equivalent node containing only And, Or and leaves
        """
        logger = get_logger()
        logger.debug(f"Starting NNF transformation of {root}")

        self._memo.clear()
        result = self._visit(root)

        logger.debug(f"NNF transformation complete: {result}")
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
        negated = n.is_negated

        if op in (BinOp.AND, BinOp.OR):
            # De Morgan swaps the connective and negates every operand
            if negated:
                op = BinOp.OR if op is BinOp.AND else BinOp.AND
            operands = [
                self._visit(~child if negated else child) for child in n.literal.children
            ]
            return ast.build_left_assoc(op, operands, op is BinOp.AND)

        left, right = binary_operands(n)

        if op is BinOp.IMPL:
            if negated:
                return self._visit(left) & self._visit(~right)
            return self._visit(~left) | self._visit(right)

        # Xor is the negation of Leq: pick the expansion by effective polarity
        equivalent = (op is BinOp.LEQ) != negated
        if equivalent:
            return (self._visit(left) & self._visit(right)) | (
                self._visit(~left) & self._visit(~right)
            )
        return (self._visit(left) & self._visit(~right)) | (
            self._visit(~left) & self._visit(right)
        )


def binary_operands(n: Node) -> Tuple[Node, Node]:
    """Return the two operands of a Binary node, left-associating extras.

    ``Binary(op, (a, b, c))`` yields ``(Binary(op, (a, b)), c)``.
    """
    children = n.literal.children
    if len(children) == 2:
        return children[0], children[1]

    left = ast.build_left_assoc(n.literal.op, children[:-1], True)
    return left, children[-1]


def nnf(node: Node) -> Node:
    """Return the NNF of a node."""
    return NNFTransformer().transform(node)


def to_nnf(tree: Tree) -> Tree:
    """Rewrite a tree into NNF.

    Args:
        tree: Parsed formula

    Returns:
        New tree (with a copy of the variable cells) holding the NNF
    """
    logger = get_logger()
    result = tree.derive(nnf(tree.root))
    logger.stage_result("nnf", str(result))
    return result
