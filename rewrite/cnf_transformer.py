# rewrite/cnf_transformer.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Expression tree transformer for algebraic Conjunctive Normal Form

"""Transforms expression trees into Conjunctive Normal Form (CNF) by algebra.

The transformation first rewrites the formula into NNF, then distributes
disjunction over conjunction:

    (A & B) | C  ->  (A | C) & (B | C)
    A | (B & C)  ->  (A | B) & (A | C)

The result is a left-associated conjunction of left-associated disjunctions
of literals, where a literal is a constant, a variable or a negated variable.

After every step the clause list is reduced: repeated literals and clauses
are dropped, clauses that are always true (``x | !x``, or containing ``1``)
are removed, ``0`` literals are removed, and a clause is dropped when another
clause uses a proper subset of its literals. An empty clause stands for
``0``, an empty clause list for ``1``. Distribution can still blow up
exponentially; the minimizer produces the smallest CNF instead.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from rpn import ast_nodes as ast
from rpn.ast_nodes import BinOp, Node
from rpn.tree import Tree
from .nnf_transformer import NNFTransformer
from utils.logger import get_logger


Clause = Tuple[Node, ...]


class CNFTransformer:
    """Rewrites an expression tree into CNF through NNF and distribution."""

    def __init__(self):
        self._nnf = NNFTransformer()

    def transform(self, root: Node) -> Node:
        """Transform a node into CNF.

        Args:
            root: Root node of the expression to transform

        Returns:
            Equivalent conjunction of disjunctions of literals
        """
        logger = get_logger()
        logger.debug(f"Starting CNF transformation of {root}")

        normal = self._nnf.transform(root)
        clauses = _to_cnf(normal)
        result = build_cnf(clauses)

        logger.debug(f"CNF transformation complete: {len(clauses)} clause(s), {result}")
        return result


def _to_cnf(expr: Node) -> Tuple[Clause, ...]:
    """Convert an NNF expression into a tuple of clauses.

    Each clause is a tuple of literals read as their disjunction; the tuple
    of clauses is read as their conjunction.
    """
    if expr.is_leaf:
        return _reduce(((expr,),))

    op = expr.literal.op
    children = expr.literal.children

    # Conjunction: collect clauses
    if op is BinOp.AND:
        return _reduce(clause for child in children for clause in _to_cnf(child))

    # Disjunction: distribute over the operands' clauses
    if op is BinOp.OR:
        clauses: Tuple[Clause, ...] = ((),)
        for child in children:
            child_clauses = _to_cnf(child)
            clauses = _reduce(
                left_clause + right_clause
                for left_clause in clauses
                for right_clause in child_clauses
            )
        return clauses

    raise AssertionError(f"Operator '{op}' left in NNF expression {expr}")


def _normalize_clause(clause: Clause) -> Optional[Clause]:
    """Drop repeated and false literals; return None for an always-true clause."""
    literals = []
    for literal in clause:
        literal = literal.normalized()
        if isinstance(literal.literal, ast.Const):
            if literal.literal.value != literal.is_negated:
                return None
            continue
        if (~literal).normalized() in literals:
            return None
        if literal not in literals:
            literals.append(literal)
    return tuple(literals)


def _reduce(clauses: Iterable[Clause]) -> Tuple[Clause, ...]:
    """Normalize clauses, then drop duplicates and subsumed clauses."""
    unique: Dict[FrozenSet[Node], Clause] = {}
    for clause in clauses:
        normalized = _normalize_clause(clause)
        if normalized is not None:
            unique.setdefault(frozenset(normalized), normalized)

    keys = list(unique)
    return tuple(
        clause for key, clause in unique.items() if not any(other < key for other in keys)
    )


def build_cnf(clauses) -> Node:
    """Build a left-associated conjunction of left-associated disjunctions."""
    disjunctions = [ast.build_left_assoc(BinOp.OR, clause, False) for clause in clauses]
    return ast.build_left_assoc(BinOp.AND, disjunctions, True)


def is_cnf(node: Node) -> bool:
    """Return True if ``node`` is a conjunction of disjunctions of literals."""

    def is_literal(n: Node) -> bool:
        return n.is_leaf and (isinstance(n.literal, ast.Var) or not n.is_negated)

    def is_clause(n: Node) -> bool:
        if is_literal(n):
            return True
        return (
            not n.is_leaf
            and not n.is_negated
            and n.literal.op is BinOp.OR
            and all(is_clause(child) for child in n.literal.children)
        )

    if is_clause(node):
        return True
    return (
        not node.is_leaf
        and not node.is_negated
        and node.literal.op is BinOp.AND
        and all(is_cnf(child) for child in node.literal.children)
    )


def to_cnf(tree: Tree) -> Tree:
    """Rewrite a tree into CNF by NNF conversion and distribution.

    Args:
        tree: Parsed formula

    Returns:
        New tree (with a copy of the variable cells) holding the CNF
    """
    logger = get_logger()
    result = tree.derive(CNFTransformer().transform(tree.root))
    logger.stage_result("cnf", str(result))
    return result
